"""
Linear System — решение систем линейных уравнений по расширенной матрице

Вход: расширенная сетка [A | b] размера n × (n+1).

Выбор алгоритма:
- n ≤ 10: x = A⁻¹ · b (обратная матрица из модуля inverse);
  Singular оборачивается в UnsolvableSystem
- n > 10: прямой Гаусс-Жордан по столбцам 0..n с частичным выбором пивота

ИЗВЕСТНОЕ ПОВЕДЕНИЕ (n > 10):
Столбец с пренебрежимо малым пивотом пропускается без ошибки.
NoSolution выдаётся только для строк вида 0 = c (c != 0). Совместная
система неполного ранга возвращает значения столбца свободных членов
как есть, без признака бесконечного множества решений.
"""

import logging

from src.core.math.determinant import GAUSSIAN_SWITCH_SIZE
from src.core.math.errors import InvalidShape, NoSolution, Singular, UnsolvableSystem
from src.core.math.grid_ops import Grid, copy_grid, multiply_grids
from src.core.math.inverse import inverse
from src.core.math.numerical_safeguards import (
    EPS_PIVOT,
    exceeds_tolerance,
    is_negligible,
)

logger = logging.getLogger(__name__)


# =============================================================================
# PUBLIC API
# =============================================================================


def solve(grid: Grid) -> list[float]:
    """
    Решение системы, заданной расширенной сеткой.

    Args:
        grid: Сетка n × (n+1), последний столбец — свободные члены

    Returns:
        Список из n значений неизвестных в порядке строк

    Raises:
        InvalidShape: Если форма не n × (n+1)
        UnsolvableSystem: Если (n ≤ 10) матрица коэффициентов вырождена
        NoSolution: Если (n > 10) система несовместна

    Examples:
        >>> solve([[2.0, 1.0, 5.0], [1.0, 3.0, 10.0]])  # doctest: +SKIP
        [1.0, 3.0]
    """
    rows, cols = len(grid), len(grid[0])
    if cols != rows + 1:
        raise InvalidShape(
            f"Matrix must be augmented (n rows x n+1 columns), got {rows}x{cols}"
        )

    if rows > GAUSSIAN_SWITCH_SIZE:
        logger.debug("solve: n=%d, using gauss-jordan elimination", rows)
        return solve_gauss_jordan(grid)

    logger.debug("solve: n=%d, using inverse matrix", rows)
    return solve_by_inverse(grid)


def solve_by_inverse(grid: Grid) -> list[float]:
    """
    x = A⁻¹ · b для расширенной сетки [A | b].

    Raises:
        UnsolvableSystem: Если A вырождена (исходная Singular в cause)
    """
    n = len(grid)
    coefficients = [row[:n] for row in grid]
    constants = [[row[n]] for row in grid]

    try:
        coefficients_inverse = inverse(coefficients)
    except Singular as exc:
        raise UnsolvableSystem(
            f"Could not solve the system by inverse: {exc}", cause=exc
        ) from exc

    solution = multiply_grids(coefficients_inverse, constants)
    return [row[0] for row in solution]


def solve_gauss_jordan(grid: Grid) -> list[float]:
    """
    Прямое исключение Гаусса-Жордана на копии расширенной сетки.

    Raises:
        NoSolution: Если после исключения есть строка 0 = c, c != 0
    """
    n = len(grid)
    augmented = copy_grid(grid)

    for i in range(n):
        max_row = i
        for j in range(i + 1, n):
            if abs(augmented[j][i]) > abs(augmented[max_row][i]):
                max_row = j

        if max_row != i:
            augmented[i], augmented[max_row] = augmented[max_row], augmented[i]

        # Нет единственного решения по этому столбцу: идём дальше
        if is_negligible(augmented[i][i], EPS_PIVOT):
            continue

        pivot = augmented[i][i]
        for j in range(i, n + 1):
            augmented[i][j] /= pivot

        for j in range(n):
            if j != i:
                factor = augmented[j][i]
                for k in range(i, n + 1):
                    augmented[j][k] -= factor * augmented[i][k]

    for i in range(n):
        zero_row = not any(
            exceeds_tolerance(augmented[i][j], EPS_PIVOT) for j in range(n)
        )
        if zero_row and exceeds_tolerance(augmented[i][n], EPS_PIVOT):
            raise NoSolution(f"The system has no solution (row {i + 1} reads 0 = {augmented[i][n]:g})")

    return [augmented[i][n] for i in range(n)]
