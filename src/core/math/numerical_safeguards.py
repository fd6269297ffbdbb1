"""
Numerical Safeguards — допуски и проверки для матричных вычислений

Модуль собирает все epsilon-параметры матричного движка в одном месте:
- Единый порог нуля для пивотов, сингулярности и несовместных строк
- Проверки валидности float (NaN/Inf не допускаются во входных данных)
- Epsilon-сравнения для скаляров и матричных элементов

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. EPS_PIVOT = 1e-10 — единственный порог нуля во всей системе
2. Входные данные с NaN/Inf отклоняются на границе (не санитизируются)
3. Все проверки детерминированы и воспроизводимы
"""

import math
from decimal import ROUND_HALF_UP, Context, Decimal
from numbers import Real
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Порог нуля для пивотов, определителя и проверки несовместности
# Значение фиксировано: от него зависит выбор пивота и результат singular-проверки
EPS_PIVOT: Final[float] = 1e-10

# Допуск для проверки A·A⁻¹ ≈ I и подобных сравнений матриц
EPS_MATRIX_COMPARE: Final[float] = 1e-9

# Количество знаков после запятой при отображении результата
DISPLAY_DECIMALS: Final[int] = 4


# =============================================================================
# ВАЛИДНОСТЬ ЗНАЧЕНИЙ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return math.isfinite(value)


def is_real_number(value: object) -> bool:
    """
    Проверка, что значение — конечное вещественное число.

    bool формально является int, но как элемент матрицы отклоняется.

    Args:
        value: Произвольный объект

    Returns:
        True для int/float (и прочих numbers.Real) с конечным значением

    Examples:
        >>> is_real_number(1.5)
        True
        >>> is_real_number(True)
        False
        >>> is_real_number(float('nan'))
        False
        >>> is_real_number("1")
        False
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        return False
    return is_valid_float(float(value))


# =============================================================================
# EPSILON-СРАВНЕНИЯ
# =============================================================================


def is_negligible(value: float, eps: float = EPS_PIVOT) -> bool:
    """
    Проверка, что значение неотличимо от нуля (строго меньше eps по модулю).

    Используется для пивотов и определителя: |x| < 1e-10 → ноль.

    Args:
        value: Проверяемое значение
        eps: Порог (default: EPS_PIVOT)

    Returns:
        True если abs(value) < eps
    """
    return abs(value) < eps


def exceeds_tolerance(value: float, eps: float = EPS_PIVOT) -> bool:
    """
    Проверка, что значение заметно отлично от нуля (строго больше eps).

    Не является отрицанием is_negligible: при abs(value) == eps обе
    функции возвращают False.
    """
    return abs(value) > eps


def is_close(a: float, b: float, abs_tol: float = EPS_MATRIX_COMPARE) -> bool:
    """
    Сравнение двух float с абсолютным допуском.

    Args:
        a: Первое значение
        b: Второе значение
        abs_tol: Абсолютный допуск (default: EPS_MATRIX_COMPARE)

    Returns:
        True если abs(a - b) <= abs_tol
    """
    return math.isclose(a, b, rel_tol=0.0, abs_tol=abs_tol)


def grids_close(
    left: list[list[float]],
    right: list[list[float]],
    abs_tol: float = EPS_MATRIX_COMPARE,
) -> bool:
    """
    Поэлементное сравнение двух сеток с абсолютным допуском.

    Сетки разной формы считаются неравными.
    """
    if len(left) != len(right):
        return False

    for left_row, right_row in zip(left, right):
        if len(left_row) != len(right_row):
            return False
        for a, b in zip(left_row, right_row):
            if not is_close(a, b, abs_tol=abs_tol):
                return False

    return True


# =============================================================================
# ОКРУГЛЕНИЕ ДЛЯ ОТОБРАЖЕНИЯ
# =============================================================================


def round_for_display(value: float, decimals: int = DISPLAY_DECIMALS) -> float:
    """
    Округление значения для отображения.

    Отрицательный ноль после округления нормализуется в 0.0,
    чтобы -0.00001 не отображался как "-0".

    Округляется точное двоичное значение float; ровно половина
    округляется от нуля (0.03125 → 0.0313, -0.03125 → -0.0313),
    а не к чётному, как во встроенном round().

    Args:
        value: Исходное значение
        decimals: Количество знаков после запятой

    Returns:
        Округлённое значение

    Raises:
        ValueError: Если decimals < 0

    Examples:
        >>> round_for_display(0.123456)
        0.1235
        >>> round_for_display(-0.00001)
        0.0
        >>> round_for_display(0.03125)
        0.0313
    """
    if decimals < 0:
        raise ValueError(f"decimals must be non-negative, got {decimals}")

    if not is_valid_float(value):
        return value

    # Точное двоичное значение, половина округляется от нуля
    exact = Decimal(value)
    context = Context(prec=max(exact.adjusted(), 0) + decimals + 2)
    rounded = float(
        exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP, context=context)
    )
    if rounded == 0.0:
        return 0.0
    return rounded
