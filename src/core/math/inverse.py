"""
Inverse — обратная матрица с выбором алгоритма по размеру

Выбор алгоритма:
- n = 1: [[1/a]]
- n = 2: [[d, -b], [-c, a]] / det
- 3 ≤ n ≤ 10: матрица алгебраических дополнений → транспонирование
  (присоединённая матрица) → деление на det
- n > 10: Гаусс-Жордан на расширенной матрице [A | I] с частичным
  выбором пивота (максимум по модулю)

Сингулярность проверяется ДО выбора алгоритма: |det| < EPS_PIVOT → Singular.
При n > INVERSE_ADVISORY_SIZE выдаётся LargeMatrixWarning (не ошибка).
"""

import logging
import warnings
from typing import Final

from src.core.math.determinant import (
    GAUSSIAN_SWITCH_SIZE,
    cofactor,
    determinant,
    ensure_square,
)
from src.core.math.errors import LargeMatrixWarning, Singular
from src.core.math.grid_ops import Grid, transpose_grid
from src.core.math.numerical_safeguards import EPS_PIVOT, is_negligible

logger = logging.getLogger(__name__)

# Размер, начиная с которого (строго больше) выдаётся предупреждение о скорости
INVERSE_ADVISORY_SIZE: Final[int] = 15


# =============================================================================
# PUBLIC API
# =============================================================================


def inverse(grid: Grid) -> Grid:
    """
    Обратная матрица для квадратной невырожденной сетки.

    Args:
        grid: Квадратная сетка n × n (не изменяется)

    Returns:
        Новая сетка A⁻¹

    Raises:
        NotSquare: Если сетка не квадратная
        Singular: Если |det| < EPS_PIVOT или пивот Гаусса-Жордана вырожден

    Warns:
        LargeMatrixWarning: Если n > INVERSE_ADVISORY_SIZE
    """
    ensure_square(grid, "calculate the inverse")
    n = len(grid)

    if n > INVERSE_ADVISORY_SIZE:
        message = f"Computing the inverse of a {n}x{n} matrix may take a long time"
        logger.warning(message)
        warnings.warn(message, LargeMatrixWarning, stacklevel=2)

    det = determinant(grid)
    if is_negligible(det, EPS_PIVOT):
        raise Singular(f"Matrix has no inverse (determinant = {det:g})")

    if n == 1:
        return [[1.0 / grid[0][0]]]

    if n == 2:
        (a, b), (c, d) = grid
        return [
            [d / det, -b / det],
            [-c / det, a / det],
        ]

    if n > GAUSSIAN_SWITCH_SIZE:
        logger.debug("inverse: n=%d, using gauss-jordan elimination", n)
        return inverse_gauss_jordan(grid)

    logger.debug("inverse: n=%d, using adjugate method", n)
    return inverse_adjugate(grid, det)


def inverse_adjugate(grid: Grid, det: float) -> Grid:
    """
    Обратная матрица через присоединённую: adj(A) / det.

    Args:
        grid: Квадратная сетка n ≥ 2
        det: Заранее вычисленный ненулевой определитель

    Returns:
        Новая сетка A⁻¹
    """
    n = len(grid)
    cofactors = [[cofactor(grid, i, j) for j in range(n)] for i in range(n)]
    adjugate = transpose_grid(cofactors)
    return [[value / det for value in row] for row in adjugate]


def inverse_gauss_jordan(grid: Grid) -> Grid:
    """
    Обратная матрица методом Гаусса-Жордана на [A | I].

    Для каждого столбца i выбирается строка с максимальным |a[j][i]|
    среди j ≥ i; строка пивота нормируется и столбец i исключается
    во всех остальных строках (включая строки выше).

    Raises:
        Singular: Если после выбора пивот меньше EPS_PIVOT
    """
    n = len(grid)
    width = 2 * n

    augmented = [
        list(grid[i]) + [1.0 if j == i else 0.0 for j in range(n)]
        for i in range(n)
    ]

    for i in range(n):
        max_row = i
        for j in range(i + 1, n):
            if abs(augmented[j][i]) > abs(augmented[max_row][i]):
                max_row = j

        if max_row != i:
            augmented[i], augmented[max_row] = augmented[max_row], augmented[i]

        if is_negligible(augmented[i][i], EPS_PIVOT):
            raise Singular("Matrix has no inverse (zero pivot during Gauss-Jordan elimination)")

        pivot = augmented[i][i]
        for j in range(i, width):
            augmented[i][j] /= pivot

        for j in range(n):
            if j != i:
                factor = augmented[j][i]
                for k in range(i, width):
                    augmented[j][k] -= factor * augmented[i][k]

    return [row[n:] for row in augmented]
