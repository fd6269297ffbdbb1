"""Matrix Calculator — командный слой между UI и матричным движком

UI-слой отправляет одну команду (OperationRequest или сырой dict) и
получает OperationResult: матрицу, скаляр или решение системы либо
типизированную ошибку. Калькулятор не хранит состояния между вызовами.

Порядок обработки:
1. (execute_payload) JSON Schema контракт operation_request
2. (execute_payload) Pydantic модель OperationRequest
3. Построение матриц через Matrix.from_sequence
4. Выполнение ровно одной операции
5. Сбор LargeMatrixWarning в advisories (вычисление не прерывается)
6. Текстовое отображение результата (округление до 4 знаков)

Любая MatrixError превращается в неуспешный результат с error_code
и сообщением вида "Error computing inverse: ...".
"""

import logging
import warnings
from dataclasses import dataclass, replace
from typing import Any

from pydantic import ValidationError

from src.core.contracts import OperationRequestValidator
from src.core.domain import MatrixOperation, OperationRequest
from src.core.math.errors import InvalidInput, LargeMatrixWarning, MatrixError
from src.core.math.formatting import format_matrix, format_number, format_solution
from src.core.math.matrix import Matrix
from src.core.math.numerical_safeguards import DISPLAY_DECIMALS

logger = logging.getLogger(__name__)


# =============================================================================
# RESULT
# =============================================================================


@dataclass(frozen=True)
class OperationResult:
    """Результат одной операции калькулятора.

    При success=True заполнено ровно одно из matrix / scalar / solution.
    """

    success: bool
    operation: MatrixOperation | None

    # Результат (один из трёх)
    matrix: Matrix | None = None
    scalar: float | None = None
    solution: tuple[float, ...] | None = None

    # Ошибка
    error_code: str = ""
    error_message: str = ""

    # Некритичные предупреждения (например, о размере матрицы)
    advisories: tuple[str, ...] = ()

    # Текст для отображения
    display: str = ""

    @property
    def result_kind(self) -> str | None:
        if self.matrix is not None:
            return "matrix"
        if self.scalar is not None:
            return "scalar"
        if self.solution is not None:
            return "solution"
        return None

    def to_payload(self) -> dict[str, Any]:
        """Результат в форме operation_result контракта."""
        return {
            "success": self.success,
            "operation": self.operation.value if self.operation is not None else None,
            "result_kind": self.result_kind,
            "matrix": self.matrix.to_list() if self.matrix is not None else None,
            "scalar": self.scalar,
            "solution": list(self.solution) if self.solution is not None else None,
            "error_code": self.error_code,
            "error_message": self.error_message,
            "advisories": list(self.advisories),
            "display": self.display,
        }


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class CalculatorConfig:
    """Конфигурация калькулятора.

    display_decimals: знаков после запятой в display
    capture_advisories: собирать LargeMatrixWarning в result.advisories
        (False — предупреждение уходит вызывающему через warnings)
    """

    display_decimals: int = DISPLAY_DECIMALS
    capture_advisories: bool = True


# =============================================================================
# CALCULATOR
# =============================================================================


class MatrixCalculator:
    """Выполнение команд UI-слоя над матричным движком."""

    def __init__(self, config: CalculatorConfig | None = None):
        """
        Args:
            config: конфигурация (опционально, используется default)
        """
        self.config = config or CalculatorConfig()
        self._request_validator = OperationRequestValidator()

    def execute_payload(self, payload: Any) -> OperationResult:
        """Выполнение команды, пришедшей в виде сырого JSON-совместимого dict.

        Args:
            payload: данные запроса (operation, left, right)

        Returns:
            OperationResult; нарушение контракта или модели → invalid_input
        """
        schema_error = self._request_validator.first_error_message(payload)
        if schema_error is not None:
            return self._failed_result(None, InvalidInput(schema_error))

        try:
            request = OperationRequest.model_validate(payload)
        except ValidationError as exc:
            first = exc.errors()[0]
            location = ".".join(str(part) for part in first["loc"])
            message = f"{location}: {first['msg']}" if location else first["msg"]
            return self._failed_result(
                MatrixOperation(payload["operation"]), InvalidInput(message)
            )

        return self.execute(request)

    def execute(self, request: OperationRequest) -> OperationResult:
        """Выполнение одной операции.

        Args:
            request: провалидированный запрос

        Returns:
            OperationResult (success или типизированная ошибка)
        """
        if not self.config.capture_advisories:
            return self._execute(request)

        with warnings.catch_warnings(record=True) as caught:
            warnings.simplefilter("always", LargeMatrixWarning)
            result = self._execute(request)

        advisories = []
        for item in caught:
            if issubclass(item.category, LargeMatrixWarning):
                advisories.append(str(item.message))
            else:
                warnings.warn_explicit(item.message, item.category, item.filename, item.lineno)

        if advisories:
            result = replace(result, advisories=tuple(advisories))
        return result

    def _execute(self, request: OperationRequest) -> OperationResult:
        operation = request.operation

        try:
            left = Matrix.from_sequence(request.left)
            right = Matrix.from_sequence(request.right) if request.right is not None else None
            result = self._dispatch(operation, left, right)
        except MatrixError as exc:
            logger.warning("Operation %s failed: %s: %s", operation.value, exc.code, exc)
            return self._failed_result(operation, exc)

        logger.info("Operation %s completed (%s)", operation.value, result.result_kind)
        return result

    def _dispatch(
        self,
        operation: MatrixOperation,
        left: Matrix,
        right: Matrix | None,
    ) -> OperationResult:
        decimals = self.config.display_decimals

        if operation == MatrixOperation.DETERMINANT:
            det = left.determinant()
            return OperationResult(
                success=True,
                operation=operation,
                scalar=det,
                display=format_number(det, decimals),
            )

        if operation == MatrixOperation.SOLVE:
            solution = tuple(left.solve())
            return OperationResult(
                success=True,
                operation=operation,
                solution=solution,
                display=format_solution(solution, decimals),
            )

        if operation == MatrixOperation.ADD:
            matrix = left.add(right)
        elif operation == MatrixOperation.SUBTRACT:
            matrix = left.subtract(right)
        elif operation == MatrixOperation.MULTIPLY:
            matrix = left.multiply(right)
        elif operation == MatrixOperation.TRANSPOSE:
            matrix = left.transpose()
        else:
            matrix = left.inverse()

        return OperationResult(
            success=True,
            operation=operation,
            matrix=matrix,
            display=format_matrix(matrix, decimals),
        )

    def _failed_result(
        self,
        operation: MatrixOperation | None,
        error: MatrixError,
    ) -> OperationResult:
        """Создание неуспешного результата.

        Args:
            operation: операция (None, если запрос не удалось разобрать)
            error: ошибка движка

        Returns:
            OperationResult с success=False
        """
        action = operation.action if operation is not None else "processing request"
        message = f"Error {action}: {error}"
        return OperationResult(
            success=False,
            operation=operation,
            error_code=error.code,
            error_message=message,
            display=message,
        )
