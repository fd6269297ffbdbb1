"""
Determinant — определитель с выбором алгоритма по размеру

Выбор алгоритма (пороги фиксированы):
- n = 1: единственный элемент
- n = 2: ad - bc
- n = 3: правило Саррюса
- 4 ≤ n ≤ 10: разложение Лапласа по первой строке (рекурсивно)
- n > 10: метод Гаусса с поиском ненулевого пивота, O(n³)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Входная сетка не изменяется (Гаусс работает на глубокой копии)
2. Пивот считается нулевым при |x| < EPS_PIVOT
3. Отсутствие ненулевого пивота в столбце → определитель ровно 0.0
"""

import logging
from typing import Final

from src.core.math.errors import NotSquare
from src.core.math.grid_ops import Grid, copy_grid, minor_grid
from src.core.math.numerical_safeguards import (
    EPS_PIVOT,
    exceeds_tolerance,
    is_negligible,
)

logger = logging.getLogger(__name__)

# =============================================================================
# ПОРОГИ ВЫБОРА АЛГОРИТМА
# =============================================================================

# Наибольший размер с формулой в замкнутом виде (правило Саррюса)
CLOSED_FORM_MAX_SIZE: Final[int] = 3

# При n > GAUSSIAN_SWITCH_SIZE используется исключение Гаусса
# (и Гаусс-Жордан для обратной матрицы и решения систем)
GAUSSIAN_SWITCH_SIZE: Final[int] = 10


# =============================================================================
# PUBLIC API
# =============================================================================


def determinant(grid: Grid) -> float:
    """
    Определитель квадратной сетки.

    Args:
        grid: Прямоугольная сетка n × n

    Returns:
        Определитель (float)

    Raises:
        NotSquare: Если сетка не квадратная

    Examples:
        >>> determinant([[2.0, 0.0], [0.0, 2.0]])
        4.0
    """
    ensure_square(grid, "calculate the determinant")

    n = len(grid)
    if n > GAUSSIAN_SWITCH_SIZE:
        logger.debug("determinant: n=%d, using gaussian elimination", n)
    elif n > CLOSED_FORM_MAX_SIZE:
        logger.debug("determinant: n=%d, using cofactor expansion", n)

    return _determinant(grid)


def cofactor(grid: Grid, row: int, col: int) -> float:
    """
    Алгебраическое дополнение: (-1)^(row+col) · det(minor(row, col)).

    Сетка должна быть квадратной размера не меньше 2.
    """
    sign = 1.0 if (row + col) % 2 == 0 else -1.0
    return sign * _determinant(minor_grid(grid, row, col))


def determinant_cofactor(grid: Grid) -> float:
    """
    Разложение Лапласа по первой строке.

    Рекурсия завершается на базовых случаях n ≤ 3. Вызывается напрямую
    для сверки путей вычисления; determinant() применяет её только
    для 4 ≤ n ≤ 10.
    """
    det = 0.0
    for j in range(len(grid)):
        det += grid[0][j] * cofactor(grid, 0, j)
    return det


def determinant_gaussian(grid: Grid) -> float:
    """
    Определитель методом исключения Гаусса.

    Пивот меняется только если текущий диагональный элемент пренебрежимо
    мал: берётся ПЕРВАЯ строка ниже с |M[j][i]| > EPS_PIVOT (не максимальная).
    Каждая перестановка строк меняет знак определителя.

    Args:
        grid: Квадратная сетка (не изменяется)

    Returns:
        Произведение пивотов с учётом знака перестановок
    """
    work = copy_grid(grid)
    n = len(work)
    det = 1.0

    for i in range(n):
        if is_negligible(work[i][i], EPS_PIVOT):
            pivot_row = -1
            for j in range(i + 1, n):
                if exceeds_tolerance(work[j][i], EPS_PIVOT):
                    pivot_row = j
                    break

            if pivot_row == -1:
                return 0.0

            work[i], work[pivot_row] = work[pivot_row], work[i]
            det *= -1.0

        det *= work[i][i]

        # Исключение под пивотом
        for j in range(i + 1, n):
            factor = work[j][i] / work[i][i]
            for k in range(i, n):
                work[j][k] -= factor * work[i][k]

    return det


def ensure_square(grid: Grid, action: str) -> None:
    """
    Проверка квадратности сетки.

    Args:
        grid: Проверяемая сетка
        action: Описание операции для сообщения об ошибке

    Raises:
        NotSquare: Если число строк != числу столбцов
    """
    rows, cols = len(grid), len(grid[0])
    if rows != cols:
        raise NotSquare(f"Matrix must be square to {action}, got {rows}x{cols}")


# =============================================================================
# ВНУТРЕННИЙ ДИСПЕТЧЕР
# =============================================================================


def _determinant(grid: Grid) -> float:
    n = len(grid)

    if n == 1:
        return grid[0][0]

    if n == 2:
        return grid[0][0] * grid[1][1] - grid[0][1] * grid[1][0]

    if n == 3:
        a, b, c = grid[0]
        d, e, f = grid[1]
        g, h, i = grid[2]
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    if n > GAUSSIAN_SWITCH_SIZE:
        return determinant_gaussian(grid)

    return determinant_cofactor(grid)
