"""
Matrix — плотная двумерная матрица вещественных чисел

Единственная числовая сущность движка. Валидация выполняется один раз
на границе (конструктор, from_sequence, fill); все внутренние алгоритмы
работают с уже проверенными сетками и повторно не валидируют.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. rows ≥ 1, cols ≥ 1, каждая строка содержит ровно cols элементов
2. Все элементы — конечные float
3. Любая операция (кроме fill) возвращает НОВУЮ матрицу или число;
   операнды не изменяются
4. Нет общего изменяемого состояния: хранилище копируется при fill,
   from_sequence и при выдаче data
"""

from collections.abc import Sequence
from typing import Any

from src.core.math.determinant import cofactor as grid_cofactor
from src.core.math.determinant import determinant as grid_determinant
from src.core.math.determinant import ensure_square
from src.core.math.errors import DimensionMismatch, InvalidDimensions, InvalidInput
from src.core.math.grid_ops import (
    Grid,
    add_grids,
    copy_grid,
    identity_grid,
    minor_grid,
    multiply_grids,
    negate_grid,
    scale_grid,
    transpose_grid,
    zeros_grid,
)
from src.core.math.inverse import inverse as grid_inverse
from src.core.math.linear_system import solve as grid_solve
from src.core.math.numerical_safeguards import (
    EPS_MATRIX_COMPARE,
    grids_close,
    is_real_number,
)


# =============================================================================
# ВАЛИДАЦИЯ ВХОДНЫХ ДАННЫХ
# =============================================================================


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_row_sequence(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _split_rows(values: Any) -> list[Sequence]:
    """
    Разбор внешней последовательности на строки.

    Raises:
        InvalidInput: Если values или одна из строк не является последовательностью
    """
    if not _is_row_sequence(values):
        raise InvalidInput("Matrix values must be a two-dimensional sequence")

    rows = list(values)
    for index, row in enumerate(rows):
        if not _is_row_sequence(row):
            raise InvalidInput(f"Row {index + 1} is not a sequence of numbers")

    return rows


def _coerce_rows(rows: list[Sequence]) -> Grid:
    """
    Копирование строк в новую сетку float с проверкой каждого элемента.

    Позиции в сообщениях об ошибках нумеруются с 1.

    Raises:
        InvalidInput: Если элемент не является конечным вещественным числом
    """
    grid = []
    for i, row in enumerate(rows):
        line = []
        for j, value in enumerate(row):
            if not is_real_number(value):
                raise InvalidInput(
                    f"Value at position {i + 1},{j + 1} is not a valid number: {value!r}"
                )
            line.append(float(value))
        grid.append(line)
    return grid


# =============================================================================
# MATRIX
# =============================================================================


class Matrix:
    """
    Плотная матрица rows × cols.

    Создание:
        Matrix(rows, cols)             — нулевая матрица
        Matrix.from_sequence(values)   — из вложенной последовательности
        Matrix.identity(n)             — единичная матрица

    Операции возвращают новые экземпляры: add, subtract, negate, scale,
    multiply, transpose, minor, inverse. determinant и cofactor возвращают
    float, solve — список float.
    """

    def __init__(self, rows: int, cols: int):
        """
        Нулевая матрица rows × cols.

        Raises:
            InvalidDimensions: Если rows или cols не положительное целое
        """
        if not _is_positive_int(rows) or not _is_positive_int(cols):
            raise InvalidDimensions(
                f"Dimensions must be positive integers, got rows={rows!r}, cols={cols!r}"
            )

        self._rows = rows
        self._cols = cols
        self._data: Grid = zeros_grid(rows, cols)

    # -------------------------------------------------------------------------
    # Фабрики
    # -------------------------------------------------------------------------

    @classmethod
    def create(cls, rows: int, cols: int) -> "Matrix":
        """Нулевая матрица rows × cols (эквивалент конструктора)."""
        return cls(rows, cols)

    @classmethod
    def zeros(cls, rows: int, cols: int) -> "Matrix":
        return cls(rows, cols)

    @classmethod
    def identity(cls, n: int) -> "Matrix":
        """
        Единичная матрица n × n.

        Raises:
            InvalidDimensions: Если n не положительное целое
        """
        matrix = cls(n, n)
        matrix._data = identity_grid(n)
        return matrix

    @classmethod
    def from_sequence(cls, values: Sequence[Sequence[float]]) -> "Matrix":
        """
        Матрица из вложенной последовательности чисел.

        Размерности выводятся: rows = len(values), cols = len(values[0]).
        Данные копируются, исходная последовательность не сохраняется.

        Args:
            values: Непустая прямоугольная последовательность строк

        Returns:
            Новая матрица

        Raises:
            InvalidInput: Пустой ввод, пустая строка, строки разной длины,
                нечисловой элемент, NaN/Inf

        Examples:
            >>> Matrix.from_sequence([[1, 2], [3, 4]]).shape
            (2, 2)
        """
        rows = _split_rows(values)
        if not rows:
            raise InvalidInput("Matrix values must contain at least one row")

        cols = len(rows[0])
        if cols == 0:
            raise InvalidInput("Matrix rows must contain at least one value")

        for index, row in enumerate(rows):
            if len(row) != cols:
                raise InvalidInput(
                    f"Matrix rows must all have the same length: "
                    f"row 1 has {cols} values, row {index + 1} has {len(row)}"
                )

        return cls._from_grid(_coerce_rows(rows))

    @classmethod
    def _from_grid(cls, grid: Grid) -> "Matrix":
        """Обёртка над уже проверенной сеткой (без копирования)."""
        matrix = cls(len(grid), len(grid[0]))
        matrix._data = grid
        return matrix

    # -------------------------------------------------------------------------
    # Заполнение
    # -------------------------------------------------------------------------

    def fill(self, values: Sequence[Sequence[float]]) -> None:
        """
        Заполнение матрицы значениями той же формы (глубокая копия).

        При ошибке хранилище не изменяется.

        Raises:
            InvalidInput: Если values не двумерная последовательность чисел
            DimensionMismatch: Если форма values отличается от rows × cols
        """
        rows = _split_rows(values)

        if len(rows) != self._rows or any(len(row) != self._cols for row in rows):
            found_cols = len(rows[0]) if rows else 0
            raise DimensionMismatch(
                f"Array dimensions do not match the matrix: "
                f"expected {self._rows}x{self._cols}, got {len(rows)}x{found_cols}"
            )

        self._data = _coerce_rows(rows)

    # -------------------------------------------------------------------------
    # Свойства
    # -------------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> tuple[int, int]:
        return (self._rows, self._cols)

    @property
    def is_square(self) -> bool:
        return self._rows == self._cols

    @property
    def data(self) -> Grid:
        """Копия элементов матрицы."""
        return copy_grid(self._data)

    def to_list(self) -> Grid:
        return copy_grid(self._data)

    def __getitem__(self, position: tuple[int, int]) -> float:
        row, col = position
        return self._data[row][col]

    # -------------------------------------------------------------------------
    # Арифметика
    # -------------------------------------------------------------------------

    def add(self, other: "Matrix") -> "Matrix":
        """
        Поэлементная сумма.

        Raises:
            DimensionMismatch: Если формы различаются
        """
        return Matrix._from_grid(add_grids(self._data, other._data))

    def subtract(self, other: "Matrix") -> "Matrix":
        """
        Разность self - other.

        Вычисляется как self + (-other), что совпадает по округлению
        со сложением с отрицанием.

        Raises:
            DimensionMismatch: Если формы различаются
        """
        return self.add(other.negate())

    def negate(self) -> "Matrix":
        return Matrix._from_grid(negate_grid(self._data))

    def scale(self, factor: float) -> "Matrix":
        """Умножение каждого элемента на скаляр factor."""
        return Matrix._from_grid(scale_grid(self._data, factor))

    def multiply(self, other: "Matrix") -> "Matrix":
        """
        Матричное произведение self · other, результат rows × other.cols.

        Raises:
            DimensionMismatch: Если self.cols != other.rows
        """
        return Matrix._from_grid(multiply_grids(self._data, other._data))

    def transpose(self) -> "Matrix":
        """Транспонированная матрица cols × rows."""
        return Matrix._from_grid(transpose_grid(self._data))

    # -------------------------------------------------------------------------
    # Производные величины
    # -------------------------------------------------------------------------

    def determinant(self) -> float:
        """
        Определитель.

        Raises:
            NotSquare: Если матрица не квадратная
        """
        return grid_determinant(self._data)

    def minor(self, row: int, col: int) -> "Matrix":
        """
        Минорная матрица без строки row и столбца col.

        Raises:
            NotSquare: Если матрица не квадратная
            InvalidDimensions: Если матрица 1×1 (минор пуст)
            IndexError: Если row или col вне диапазона
        """
        ensure_square(self._data, "take a minor")
        if self._rows == 1:
            raise InvalidDimensions("A 1x1 matrix has no minors")
        self._check_position(row, col)
        return Matrix._from_grid(minor_grid(self._data, row, col))

    def cofactor(self, row: int, col: int) -> float:
        """
        Алгебраическое дополнение: (-1)^(row+col) · det(minor(row, col)).

        Raises:
            NotSquare: Если матрица не квадратная
            InvalidDimensions: Если матрица 1×1
            IndexError: Если row или col вне диапазона
        """
        ensure_square(self._data, "compute a cofactor")
        if self._rows == 1:
            raise InvalidDimensions("A 1x1 matrix has no cofactors")
        self._check_position(row, col)
        return grid_cofactor(self._data, row, col)

    def inverse(self) -> "Matrix":
        """
        Обратная матрица.

        Raises:
            NotSquare: Если матрица не квадратная
            Singular: Если |det| < EPS_PIVOT

        Warns:
            LargeMatrixWarning: Если размер больше 15
        """
        return Matrix._from_grid(grid_inverse(self._data))

    def solve(self) -> list[float]:
        """
        Решение системы, заданной этой расширенной матрицей [A | b].

        Raises:
            InvalidShape: Если форма не n × (n+1)
            UnsolvableSystem: Если n ≤ 10 и A вырождена
            NoSolution: Если n > 10 и система несовместна
        """
        return grid_solve(self._data)

    def is_close(self, other: "Matrix", abs_tol: float = EPS_MATRIX_COMPARE) -> bool:
        """Поэлементное сравнение с абсолютным допуском (формы должны совпадать)."""
        return grids_close(self._data, other._data, abs_tol=abs_tol)

    def _check_position(self, row: int, col: int) -> None:
        if not 0 <= row < self._rows or not 0 <= col < self._cols:
            raise IndexError(
                f"Position ({row}, {col}) is outside a {self._rows}x{self._cols} matrix"
            )

    # -------------------------------------------------------------------------
    # Операторы
    # -------------------------------------------------------------------------

    def __add__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.negate()

    def __matmul__(self, other: "Matrix") -> "Matrix":
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    __hash__ = None  # mutable через fill

    def __repr__(self) -> str:
        return f"Matrix({self._data!r})"


# =============================================================================
# CONVENIENCE FUNCTIONS
# =============================================================================


def solve_system(values: Sequence[Sequence[float]]) -> list[float]:
    """
    Решение системы по вложенной последовательности [A | b].

    Raises:
        InvalidInput: Если values некорректны
        InvalidShape, UnsolvableSystem, NoSolution: см. Matrix.solve
    """
    return Matrix.from_sequence(values).solve()
