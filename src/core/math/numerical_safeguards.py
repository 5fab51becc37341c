"""
Numerical Safeguards — Safe Math Primitives for Formatting

Модуль обеспечивает численную корректность всех форматтеров:
- Валидация входов (int/float, NaN/Inf, неотрицательность)
- Точное деление целых через Decimal (без потери точности float)
- Округление half-up до заданного числа знаков
- Отбрасывание незначащих нулей в десятичной записи

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf никогда не попадают в форматтеры (InvalidInput)
2. Округление детерминировано: ROUND_HALF_UP, а не banker's rounding float
3. Деление больших int выполняется в Decimal с запасом точности
4. bool не считается целым числом
"""

import math
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import Final

from src.core.errors import InvalidInput

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Толерантность сходимости цепной дроби для as_fraction
EPS_FRACTION: Final[float] = 1.0e-3

# Точность Decimal-контекста для точного деления.
# Мантисса word() в корзине decillion достигает 10**67, плюс 2 знака после точки.
DECIMAL_PRECISION: Final[int] = 120


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_int(value: int, name: str) -> int:
    """
    Валидация, что значение — целое число (bool отклоняется).

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        value без изменений

    Raises:
        InvalidInput: Если value не int или является bool
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    return value


def validate_non_negative_int(value: int, name: str) -> int:
    """
    Валидация, что значение — неотрицательное целое.

    Raises:
        InvalidInput: Если value не int или value < 0
    """
    validate_int(value, name)
    if value < 0:
        raise InvalidInput(f"{name} must be non-negative, got {value}")
    return value


def validate_finite(value: float, name: str) -> float:
    """
    Валидация, что значение — конечное вещественное число.

    Принимает int и float (bool отклоняется). Возвращает float.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Returns:
        float(value)

    Raises:
        InvalidInput: Если value не число, NaN или Inf

    Examples:
        >>> validate_finite(3, "value")
        3.0
        >>> validate_finite(float("nan"), "value")  # doctest: +SKIP
        Traceback (most recent call last):
            ...
        InvalidInput: value must be a finite number (not NaN/Inf), got nan
    """
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInput(f"{name} must be a number, got {value!r}")

    result = float(value)
    if not is_valid_float(result):
        raise InvalidInput(f"{name} must be a finite number (not NaN/Inf), got {value}")
    return result


def validate_positive(value: float, name: str) -> float:
    """
    Валидация, что значение конечное и строго положительное.

    Raises:
        InvalidInput: Если value <= 0 или NaN/Inf
    """
    result = validate_finite(value, name)
    if result <= 0:
        raise InvalidInput(f"{name} must be positive, got {value}")
    return result


# =============================================================================
# ТОЧНАЯ АРИФМЕТИКА И ОКРУГЛЕНИЕ
# =============================================================================


def exact_ratio(numerator: int, denominator: int) -> Decimal:
    """
    Точное отношение двух целых в Decimal.

    float(numerator) / float(denominator) теряет точность для значений
    > 2**53 и даёт 999.99499... вместо 999.995, что ломает половинное
    округление. Деление выполняется в контексте DECIMAL_PRECISION.

    Args:
        numerator: Числитель
        denominator: Знаменатель (!= 0)

    Returns:
        numerator / denominator как Decimal

    Examples:
        >>> exact_ratio(999_995, 1000)
        Decimal('999.995')
    """
    if denominator == 0:
        raise InvalidInput("denominator must be non-zero")

    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return Decimal(numerator) / Decimal(denominator)


def round_half_up(value: Decimal, places: int) -> Decimal:
    """
    Округление до places знаков после точки (half away from zero).

    Args:
        value: Значение (Decimal)
        places: Количество знаков после точки (>= 0)

    Returns:
        Округлённое значение

    Examples:
        >>> round_half_up(Decimal("2.745"), 2)
        Decimal('2.75')
        >>> round_half_up(Decimal("999.995"), 2)
        Decimal('1000.00')
    """
    if places < 0:
        raise InvalidInput(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = DECIMAL_PRECISION
        return value.quantize(quantum, rounding=ROUND_HALF_UP)


def strip_trailing_zeros(text: str) -> str:
    """
    Отбрасывание незначащих нулей дробной части.

    Examples:
        >>> strip_trailing_zeros("1.50")
        '1.5'
        >>> strip_trailing_zeros("1.00")
        '1'
        >>> strip_trailing_zeros("100")
        '100'
    """
    if "." not in text:
        return text
    return text.rstrip("0").rstrip(".")


def format_rounded(value: Decimal, places: int) -> str:
    """
    Округление half-up и компактная запись без хвостовых нулей.

    Экспоненциальная запись Decimal не используется никогда.

    Examples:
        >>> format_rounded(Decimal("3.456782984"), 2)
        '3.46'
        >>> format_rounded(Decimal("1.0004"), 2)
        '1'
    """
    rounded = round_half_up(value, places)
    return strip_trailing_zeros(f"{rounded:.{places}f}")
