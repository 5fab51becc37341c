"""
Number — Human-readable numbers

Форматтеры чисел:
- ordinal: 385 → "385th"
- grouped: 2858493.49 → "2,858,493.49"
- word: 3456782984 → "3.46 billion"
- spelled_digit: 7 → "seven"
- as_fraction: 0.4456 → "41/92", 1.5 → "1 1/2"
- scientific: 0.000000385384 → "3.85 × 10⁻⁷"
- clamp: 123.456 при ceil=120 → ">120.0"

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. NaN/Inf и нечисловой ввод → InvalidInput
2. Мантиссы word() вычисляются точно (Decimal) с округлением half-up
3. word() для значений >= 10**100 → Unrepresentable
4. clamp() проверяет floor раньше ceil; floor > ceil → AmbiguousFallback
"""

import logging
import math
from decimal import Decimal
from typing import Callable, Final, Optional, Union

from src.core.domain.units import (
    GOOGOL_POWER,
    ORDINAL_SUFFIXES,
    SPELLED_DIGITS,
    SUPERSCRIPTS,
    WORD_POWERS,
)
from src.core.errors import AmbiguousFallback, Unrepresentable
from src.core.math.continued_fraction import approximate_fraction
from src.core.math.numerical_safeguards import (
    EPS_FRACTION,
    exact_ratio,
    format_rounded,
    round_half_up,
    strip_trailing_zeros,
    validate_finite,
    validate_int,
    validate_non_negative_int,
)

logger = logging.getLogger(__name__)

Number = Union[int, float]

# Знаков после точки в мантиссе word()
WORD_PRECISION: Final[int] = 2

# Знаков после точки в мантиссе scientific() по умолчанию
SCIENTIFIC_PRECISION_DEFAULT: Final[int] = 2


# =============================================================================
# ORDINAL / SPELLED DIGIT
# =============================================================================


def ordinal(value: int) -> str:
    """
    Порядковое числительное: 1 → "1st", 12 → "12th", 385 → "385th".

    Суффикс выбирается по модулю значения, знак сохраняется:
    -1 → "-1st", -11 → "-11th".

    Raises:
        InvalidInput: Если value не int
    """
    validate_int(value, "value")
    magnitude = abs(value)

    if magnitude % 100 in (11, 12, 13):
        return f"{value}{ORDINAL_SUFFIXES[0]}"
    return f"{value}{ORDINAL_SUFFIXES[magnitude % 10]}"


def spelled_digit(value: int) -> str:
    """Цифры 0..9 словами ("zero".."nine"), остальное как есть."""
    validate_int(value, "value")
    if 0 <= value <= 9:
        return SPELLED_DIGITS[value]
    return str(value)


# =============================================================================
# GROUPED
# =============================================================================


def grouped(value: Number, separator: str = ",", decimal_point: str = ".") -> str:
    """
    Число с разделителями разрядов в целой части.

    Дробная часть сохраняется без группировки (кратчайшее repr-представление
    float). Целочисленные float выводятся без дробной части.

    Args:
        value: int или конечный float
        separator: Разделитель групп (default: ",")
        decimal_point: Десятичный разделитель (default: ".")

    Returns:
        Строка вида "1,000" или "2,858,493.49"

    Raises:
        InvalidInput: Если value NaN/Inf или не число

    Examples:
        >>> grouped(1000)
        '1,000'
        >>> grouped(2858493.49)
        '2,858,493.49'
        >>> grouped(1234567.5, separator=" ", decimal_point=",")
        '1 234 567,5'
    """
    if isinstance(value, int) and not isinstance(value, bool):
        text = f"{value:,}"
    else:
        number = validate_finite(value, "value")
        if number.is_integer():
            text = f"{int(number):,}"
        else:
            text = f"{Decimal(repr(number)):,f}"

    return text.translate(str.maketrans({",": separator, ".": decimal_point}))


# =============================================================================
# WORD
# =============================================================================


def word(value: int) -> str:
    """
    Крупное целое как мантисса плюс слово магнитуды.

    Корзина выбирается как минимальная степень p из лестницы, для которой
    value < 10**p; мантисса = value / 10**p_prev. Если округление мантиссы
    достигает порога следующей корзины (999 995 → 1000.00 thousand),
    значение переносится на ступень выше ("1 million").

    Args:
        value: Целое число

    Returns:
        str(value) для value < 1000 (включая отрицательные),
        иначе строка вида "3.46 billion"

    Raises:
        InvalidInput: Если value не int
        Unrepresentable: Если value >= 10**100

    Examples:
        >>> word(1000)
        '1 thousand'
        >>> word(3456782984)
        '3.46 billion'
        >>> word(999_995)
        '1 million'
    """
    validate_int(value, "value")

    if value < 10 ** WORD_POWERS[0][0]:
        return str(value)
    if value >= 10**GOOGOL_POWER:
        raise Unrepresentable(f"value {value} is beyond googol (10**{GOOGOL_POWER})")

    for index in range(1, len(WORD_POWERS)):
        power, name = WORD_POWERS[index]
        if value >= 10**power:
            continue

        prev_power, prev_name = WORD_POWERS[index - 1]
        mantissa = exact_ratio(value, 10**prev_power)

        if round_half_up(mantissa, WORD_PRECISION) >= 10 ** (power - prev_power):
            logger.debug("word: %d rounds up from %s to %s", value, prev_name, name)
            return f"{format_rounded(exact_ratio(value, 10**power), WORD_PRECISION)} {name}"

        return f"{format_rounded(mantissa, WORD_PRECISION)} {prev_name}"

    # Недостижимо: value < 10**GOOGOL_POWER проверено выше
    raise Unrepresentable(f"value {value} has no magnitude bucket")


# =============================================================================
# FRACTION
# =============================================================================


def as_fraction(value: Number, eps: float = EPS_FRACTION) -> str:
    """
    Число как дробь или смешанное число.

    Целая часть w = floor(value), остаток приближается цепной дробью
    с толерантностью eps. Если знаменатель вырождается в 1, значение
    выводится с одним знаком после точки.

    Отрицательные значения форматируются по модулю со знаком "-"
    впереди: -2.25 → "-2 1/4".

    Args:
        value: Конечное число
        eps: Толерантность приближения (default: 1e-3)

    Returns:
        "n/d", "w n/d" или "x.y"

    Raises:
        InvalidInput: Если value NaN/Inf или eps <= 0

    Examples:
        >>> as_fraction(0.4456)
        '41/92'
        >>> as_fraction(1.5)
        '1 1/2'
        >>> as_fraction(2.0)
        '2.0'
    """
    number = validate_finite(value, "value")
    if number < 0:
        return "-" + as_fraction(-number, eps)

    whole = math.floor(number)
    remainder = approximate_fraction(number - whole, eps)

    if remainder.is_integral:
        return f"{number:.1f}"
    if whole > 0:
        return f"{whole} {remainder}"
    return str(remainder)


# =============================================================================
# SCIENTIFIC
# =============================================================================


def scientific(value: Number, precision: int = SCIENTIFIC_PRECISION_DEFAULT) -> str:
    """
    Научная нотация с надстрочным показателем степени.

    Мантисса округляется до precision знаков, хвостовые нули отбрасываются
    (1.00 → 1). Знак "+" показателя опускается, ведущие нули показателя
    отбрасываются (e-07 → ⁻⁷), нулевой показатель выводится как ⁰.
    Отрицательный ноль сохраняет знак.

    Args:
        value: Конечное число
        precision: Максимум знаков после точки в мантиссе (default: 2)

    Returns:
        Строка вида "3.85 × 10⁻⁷"

    Raises:
        InvalidInput: Если value NaN/Inf или precision < 0

    Examples:
        >>> scientific(0.000000385384)
        '3.85 × 10⁻⁷'
        >>> scientific(-500)
        '-5 × 10²'
    """
    number = validate_finite(value, "value")
    validate_non_negative_int(precision, "precision")

    mantissa, exponent = f"{abs(number):.{precision}e}".split("e")
    mantissa = strip_trailing_zeros(mantissa)
    sign, digits = exponent[0], exponent[1:].lstrip("0") or "0"
    if sign == "-" and digits != "0":
        digits = "-" + digits

    if math.copysign(1.0, number) < 0:
        mantissa = "-" + mantissa

    superscript = "".join(SUPERSCRIPTS[char] for char in digits)
    return f"{mantissa} × 10{superscript}"


# =============================================================================
# CLAMP
# =============================================================================


def _format_plain(value: float) -> str:
    return repr(float(value))


def clamp(
    value: Number,
    floor: Optional[Number] = None,
    ceil: Optional[Number] = None,
    formatter: Callable[[float], str] = _format_plain,
) -> str:
    """
    Значение с маркером выхода за границы.

    Порядок проверок:
    1. floor задан и value < floor → "<" + formatter(floor)
    2. ceil задан и value > ceil → ">" + formatter(ceil)
    3. иначе formatter(value)

    Args:
        value: Конечное число
        floor: Нижняя граница (optional)
        ceil: Верхняя граница (optional)
        formatter: Рендер числа (default: repr float, "120.0")

    Raises:
        InvalidInput: Если value/floor/ceil NaN/Inf
        AmbiguousFallback: Если заданы обе границы и floor > ceil

    Examples:
        >>> clamp(123.456, ceil=120)
        '>120.0'
        >>> clamp(5, floor=10)
        '<10.0'
    """
    number = validate_finite(value, "value")
    low = validate_finite(floor, "floor") if floor is not None else None
    high = validate_finite(ceil, "ceil") if ceil is not None else None

    if low is not None and high is not None and low > high:
        raise AmbiguousFallback(f"floor {floor} is greater than ceil {ceil}")

    if low is not None and number < low:
        return "<" + formatter(low)
    if high is not None and number > high:
        return ">" + formatter(high)
    return formatter(number)
