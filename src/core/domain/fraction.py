"""
Fraction — Рациональное приближение вещественного числа

Immutable Pydantic модель пары (numerator, denominator).
Создаётся алгоритмом цепных дробей (src.core.math.continued_fraction),
но может быть построена и напрямую.

ИНВАРИАНТ: denominator >= 1 (знак всегда хранится в numerator).
"""

from pydantic import BaseModel, Field


class Fraction(BaseModel):
    """
    Рациональная дробь numerator/denominator.

    Не обязательно несократимая, но приближение цепными дробями даёт
    минимальный знаменатель в пределах заданной толерантности.
    """

    numerator: int = Field(..., description="Числитель (несёт знак)")
    denominator: int = Field(..., ge=1, description="Знаменатель (>= 1)")

    model_config = {"frozen": True}  # Immutable

    @property
    def value(self) -> float:
        """Десятичное значение дроби."""
        return self.numerator / self.denominator

    @property
    def is_integral(self) -> bool:
        """True если дробь вырождается в целое (denominator == 1)."""
        return self.denominator == 1

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"
