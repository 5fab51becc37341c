"""
Тесты для Continued Fraction — Rational Approximation

Проверяемые инварианты:
1. Знаменатель >= 1
2. |value - n/d| <= eps
3. Минимальный знаменатель для "простых" дробей
4. NaN/Inf и eps <= 0 отклоняются
"""

import pytest

from src.core.domain.fraction import Fraction
from src.core.errors import InvalidInput
from src.core.math.continued_fraction import approximate_fraction


class TestApproximateFraction:
    """Тесты approximate_fraction: известные приближения."""

    def test_reference_value(self):
        """0.4456 → 41/92."""
        assert approximate_fraction(0.4456) == Fraction(numerator=41, denominator=92)

    def test_three_tenths(self):
        """0.3 → 3/10 несмотря на погрешности float в 1/(x - a)."""
        result = approximate_fraction(0.3)
        assert (result.numerator, result.denominator) == (3, 10)

    @pytest.mark.parametrize(
        "value, expected",
        [
            (0.5, (1, 2)),
            (0.25, (1, 4)),
            (0.333, (1, 3)),
            (0.75, (3, 4)),
            (2.5, (5, 2)),
        ],
    )
    def test_simple_fractions(self, value, expected):
        result = approximate_fraction(value)
        assert (result.numerator, result.denominator) == expected

    def test_below_tolerance_degenerates_to_integer(self):
        """Остаток меньше eps → denominator == 1."""
        result = approximate_fraction(0.0005)
        assert result.is_integral
        assert result.numerator == 0

    def test_integer_value(self):
        result = approximate_fraction(3.0)
        assert (result.numerator, result.denominator) == (3, 1)


class TestApproximationTolerance:
    """Инвариант |value - n/d| <= eps."""

    @pytest.mark.parametrize(
        "value",
        [0.1, 0.123, 0.142857, 0.4456, 0.618034, 0.777, 0.9, 0.9999],
    )
    def test_within_default_eps(self, value):
        result = approximate_fraction(value)
        assert result.denominator >= 1
        assert abs(value - result.value) <= 1e-3

    def test_tighter_eps_gives_closer_result(self):
        loose = approximate_fraction(0.618034, eps=1e-2)
        tight = approximate_fraction(0.618034, eps=1e-6)
        assert abs(0.618034 - tight.value) <= 1e-6
        assert tight.denominator > loose.denominator


class TestApproximationValidation:
    """Невалидные входы."""

    def test_nan_rejected(self):
        with pytest.raises(InvalidInput, match="finite"):
            approximate_fraction(float("nan"))

    def test_inf_rejected(self):
        with pytest.raises(InvalidInput):
            approximate_fraction(float("inf"))

    def test_non_positive_eps_rejected(self):
        with pytest.raises(InvalidInput, match="eps must be positive"):
            approximate_fraction(0.5, eps=0.0)
