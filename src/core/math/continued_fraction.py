"""
Continued Fraction — Rational Approximation

Модуль находит рациональное приближение вещественного числа с
минимальным знаменателем в пределах толерантности.

АЛГОРИТМ (цепные дроби, подходящие дроби h/k):
    x = value, a = floor(x)
    (h1, k1, h, k) = (1, 0, a, 1)
    пока x - a > eps * k²:
        x = 1 / (x - a)
        a = floor(x)
        (h1, k1, h, k) = (h, k, h1 + a*h, k1 + a*k)

Остановка по |x - a| <= eps * k² гарантирует |value - h/k| <= eps
(ошибка подходящей дроби ограничена 1 / (k² * x_{n+1})).

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Знаменатель всегда >= 1
2. Деление на ноль невозможно: цикл продолжается только при x - a > 0
3. NaN/Inf и eps <= 0 отклоняются (InvalidInput)
"""

import math

from src.core.domain.fraction import Fraction
from src.core.math.numerical_safeguards import (
    EPS_FRACTION,
    validate_finite,
    validate_positive,
)


def approximate_fraction(value: float, eps: float = EPS_FRACTION) -> Fraction:
    """
    Лучшее рациональное приближение value в пределах eps.

    Args:
        value: Приближаемое значение (конечное)
        eps: Толерантность сходимости (default: EPS_FRACTION = 1e-3)

    Returns:
        Fraction(numerator, denominator)

    Raises:
        InvalidInput: Если value NaN/Inf или eps <= 0

    Examples:
        >>> str(approximate_fraction(0.4456))
        '41/92'
        >>> str(approximate_fraction(0.3))
        '3/10'
        >>> str(approximate_fraction(0.0005))
        '0/1'
    """
    x = validate_finite(value, "value")
    eps = validate_positive(eps, "eps")

    a = math.floor(x)
    h1, k1, h, k = 1, 0, a, 1

    while x - a > eps * k * k:
        x = 1.0 / (x - a)
        a = math.floor(x)
        h1, k1, h, k = h, k, h1 + a * h, k1 + a * k

    return Fraction(numerator=h, denominator=k)
