"""
Matrix Errors — типизированные ошибки матричного движка

Каждая ошибка несёт стабильный строковый code, который UI-слой
использует для выбора сообщения. Все ошибки синхронные и прерывают
текущую операцию; внутренних повторов нет.

Иерархия:
    MatrixError
    ├── InvalidDimensions   (ValueError)
    ├── InvalidInput        (ValueError)
    ├── DimensionMismatch   (ValueError)
    ├── NotSquare           (ValueError)
    ├── InvalidShape        (ValueError)
    ├── Singular            (ArithmeticError)
    ├── NoSolution          (ArithmeticError)
    └── UnsolvableSystem    (ArithmeticError, оборачивает Singular)
"""

from typing import ClassVar


# =============================================================================
# EXCEPTIONS
# =============================================================================


class MatrixError(Exception):
    """Базовая ошибка матричного движка."""

    code: ClassVar[str] = "matrix_error"


class InvalidDimensions(MatrixError, ValueError):
    """Размерности не являются положительными целыми числами."""

    code: ClassVar[str] = "invalid_dimensions"


class InvalidInput(MatrixError, ValueError):
    """
    Исходные данные некорректны.

    Пустая последовательность, непрямоугольные строки, нечисловые
    элементы или NaN/Inf.
    """

    code: ClassVar[str] = "invalid_input"


class DimensionMismatch(MatrixError, ValueError):
    """Формы операндов несовместимы для операции."""

    code: ClassVar[str] = "dimension_mismatch"


class NotSquare(MatrixError, ValueError):
    """Операция определена только для квадратных матриц."""

    code: ClassVar[str] = "not_square"


class InvalidShape(MatrixError, ValueError):
    """Матрица для solve должна быть расширенной: n × (n+1)."""

    code: ClassVar[str] = "invalid_shape"


class Singular(MatrixError, ArithmeticError):
    """Определитель равен нулю (|det| < EPS_PIVOT) или пивот вырожден."""

    code: ClassVar[str] = "singular"


class NoSolution(MatrixError, ArithmeticError):
    """Система несовместна: строка вида 0 = c при c != 0."""

    code: ClassVar[str] = "no_solution"


class UnsolvableSystem(MatrixError, ArithmeticError):
    """
    Систему не удалось решить через обратную матрицу.

    Исходная ошибка доступна как cause (и как __cause__ при raise ... from).
    """

    code: ClassVar[str] = "unsolvable_system"

    def __init__(self, message: str, cause: MatrixError | None = None):
        super().__init__(message)
        self.cause = cause


# =============================================================================
# WARNINGS
# =============================================================================


class LargeMatrixWarning(UserWarning):
    """
    Некритичное предупреждение о размере матрицы.

    Выдаётся через warnings.warn; вычисление продолжается.
    """
