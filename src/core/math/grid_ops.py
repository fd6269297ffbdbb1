"""
Grid Operations — примитивы над плотными сетками list[list[float]]

Все функции принимают уже провалидированные прямоугольные сетки
и возвращают НОВЫЕ сетки. Входные сетки никогда не изменяются.

Проверка форм операндов (DimensionMismatch) выполняется здесь,
поскольку это часть семантики операции, а не повторная валидация данных.
"""

from src.core.math.errors import DimensionMismatch

Grid = list[list[float]]


# =============================================================================
# КОНСТРУКТОРЫ
# =============================================================================


def zeros_grid(rows: int, cols: int) -> Grid:
    """Сетка rows × cols, заполненная нулями."""
    return [[0.0] * cols for _ in range(rows)]


def identity_grid(n: int) -> Grid:
    """Единичная сетка n × n."""
    return [[1.0 if i == j else 0.0 for j in range(n)] for i in range(n)]


def copy_grid(grid: Grid) -> Grid:
    """Глубокая копия сетки (новые списки строк)."""
    return [list(row) for row in grid]


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def add_grids(left: Grid, right: Grid) -> Grid:
    """
    Поэлементная сумма двух сеток.

    Raises:
        DimensionMismatch: Если формы сеток различаются
    """
    rows, cols = len(left), len(left[0])
    if len(right) != rows or len(right[0]) != cols:
        raise DimensionMismatch(
            f"Matrices must have the same dimensions to be added: "
            f"{rows}x{cols} vs {len(right)}x{len(right[0])}"
        )

    return [
        [left[i][j] + right[i][j] for j in range(cols)]
        for i in range(rows)
    ]


def multiply_grids(left: Grid, right: Grid) -> Grid:
    """
    Матричное произведение left · right.

    Суммирование по k идёт по возрастанию, начиная с 0.0
    (влияет только на округление float).

    Raises:
        DimensionMismatch: Если число столбцов left != числу строк right
    """
    rows, inner, cols = len(left), len(left[0]), len(right[0])
    if inner != len(right):
        raise DimensionMismatch(
            f"Number of columns of the first matrix ({inner}) must match "
            f"the number of rows of the second ({len(right)})"
        )

    result = zeros_grid(rows, cols)
    for i in range(rows):
        for j in range(cols):
            total = 0.0
            for k in range(inner):
                total += left[i][k] * right[k][j]
            result[i][j] = total

    return result


def scale_grid(grid: Grid, factor: float) -> Grid:
    """Умножение каждого элемента на скаляр."""
    return [[value * factor for value in row] for row in grid]


def negate_grid(grid: Grid) -> Grid:
    """Смена знака каждого элемента."""
    return [[-value for value in row] for row in grid]


def transpose_grid(grid: Grid) -> Grid:
    """Транспонирование: result[j][i] = grid[i][j]."""
    rows, cols = len(grid), len(grid[0])
    return [[grid[i][j] for i in range(rows)] for j in range(cols)]


def minor_grid(grid: Grid, row: int, col: int) -> Grid:
    """Сетка без строки row и столбца col."""
    return [
        [value for j, value in enumerate(line) if j != col]
        for i, line in enumerate(grid)
        if i != row
    ]
