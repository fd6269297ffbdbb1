"""
OperationRequest — Модель запроса одной операции калькулятора

Immutable Pydantic модель команды, которую UI-слой отправляет в движок:
операция и одна или две вложенные последовательности чисел.

Модель проверяет только типы и наличие операндов. Прямоугольность
и размерности проверяет Matrix.from_sequence при выполнении.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from src.core.math.numerical_safeguards import is_real_number


# =============================================================================
# ENUMS
# =============================================================================


class MatrixOperation(str, Enum):
    """Операция калькулятора"""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    TRANSPOSE = "transpose"
    DETERMINANT = "determinant"
    INVERSE = "inverse"
    SOLVE = "solve"

    @property
    def is_binary(self) -> bool:
        """True для операций над двумя матрицами"""
        return self in _BINARY_OPERATIONS

    @property
    def action(self) -> str:
        """Описание действия для сообщений об ошибках"""
        return _ACTIONS[self]


_BINARY_OPERATIONS = frozenset(
    {MatrixOperation.ADD, MatrixOperation.SUBTRACT, MatrixOperation.MULTIPLY}
)

_ACTIONS = {
    MatrixOperation.ADD: "adding matrices",
    MatrixOperation.SUBTRACT: "subtracting matrices",
    MatrixOperation.MULTIPLY: "multiplying matrices",
    MatrixOperation.TRANSPOSE: "computing transpose",
    MatrixOperation.DETERMINANT: "computing determinant",
    MatrixOperation.INVERSE: "computing inverse",
    MatrixOperation.SOLVE: "solving system",
}


# =============================================================================
# REQUEST MODEL
# =============================================================================


class OperationRequest(BaseModel):
    """
    Запрос одной операции.

    Бинарные операции (add, subtract, multiply) требуют right,
    унарные — запрещают его.
    """

    operation: MatrixOperation = Field(..., description="Выполняемая операция")
    left: list[list[float]] = Field(..., min_length=1, description="Первый (или единственный) операнд")
    right: list[list[float]] | None = Field(
        None, validate_default=True, description="Второй операнд бинарной операции"
    )

    model_config = {"frozen": True}

    @field_validator("left", "right", mode="before")
    @classmethod
    def validate_numbers(cls, v: Any) -> Any:
        """Элементы должны быть конечными числами (bool, строки, NaN/Inf отклоняются)"""
        if not isinstance(v, (list, tuple)):
            return v

        for i, row in enumerate(v):
            if not isinstance(row, (list, tuple)):
                continue
            for j, value in enumerate(row):
                if not is_real_number(value):
                    raise ValueError(
                        f"value at position {i + 1},{j + 1} is not a valid number: {value!r}"
                    )
        return v

    @field_validator("right")
    @classmethod
    def validate_operand_count(cls, v: list[list[float]] | None, info) -> list[list[float]] | None:
        """Проверка наличия второго операнда в зависимости от операции"""
        operation = info.data.get("operation")
        if operation is None:
            return v

        if operation.is_binary and v is None:
            raise ValueError(f"operation '{operation.value}' requires a right operand")
        if not operation.is_binary and v is not None:
            raise ValueError(f"operation '{operation.value}' takes a single operand")
        return v
