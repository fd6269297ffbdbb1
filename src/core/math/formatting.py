"""
Formatting — текстовое отображение результатов

Числа округляются до DISPLAY_DECIMALS знаков и выводятся в кратчайшей
форме: 4, 0.5, -1.3333. Отрицательный ноль не выводится.
"""

from collections.abc import Sequence

from src.core.math.matrix import Matrix
from src.core.math.numerical_safeguards import DISPLAY_DECIMALS, round_for_display


def format_number(value: float, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Округлённое число без хвостовых нулей.

    Examples:
        >>> format_number(4.0)
        '4'
        >>> format_number(2 / 3)
        '0.6667'
        >>> format_number(-0.00001)
        '0'
    """
    rounded = round_for_display(value, decimals)
    text = f"{rounded:.{decimals}f}"
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text


def format_matrix(matrix: Matrix, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Матрица построчно, ячейки выровнены по правому краю.

    Examples:
        >>> print(format_matrix(Matrix.from_sequence([[0.5, 0], [0, 10]])))
        0.5    0
          0   10
    """
    cells = [[format_number(value, decimals) for value in row] for row in matrix.data]
    width = max(len(cell) for row in cells for cell in row)
    return "\n".join("  ".join(cell.rjust(width) for cell in row) for row in cells)


def format_solution(values: Sequence[float], decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Решение системы в виде строк "x1 = ...".

    Examples:
        >>> print(format_solution([1.0, 3.0]))
        x1 = 1
        x2 = 3
    """
    return "\n".join(
        f"x{index} = {format_number(value, decimals)}"
        for index, value in enumerate(values, start=1)
    )
