"""
Files — Human-readable byte sizes

Форматирование количества байт в строку вида "2.75 GB":
- DECIMAL: основание 1000, метки KB … YB
- BINARY / MEMORY: основание 1024, метки KiB … YiB

АЛГОРИТМ:
    1 → "1 byte"; 0 <= n < base → "{n} bytes"
    иначе минимальный индекс i, при котором n < base**(i+2);
    value = n / base**(i+1), округление half-up до 2 знаков,
    незначащие нули отбрасываются.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Отрицательный или нецелый ввод → InvalidInput
2. Если округление дало base (999 999 B → 1000 KB), значение
   переносится в следующую единицу (1 MB)
3. Выше YB/YiB значение выражается в YB/YiB без верхней границы
"""

import logging
from typing import Final

from src.core.domain.units import UnitSystem, unit_base, unit_labels
from src.core.math.numerical_safeguards import (
    exact_ratio,
    format_rounded,
    round_half_up,
    validate_non_negative_int,
)

logger = logging.getLogger(__name__)

# Знаков после точки в мантиссе
SIZE_PRECISION: Final[int] = 2


def natural_size(num_bytes: int, system: UnitSystem = UnitSystem.DECIMAL) -> str:
    """
    Размер в байтах как человекочитаемая строка.

    Args:
        num_bytes: Количество байт (int >= 0)
        system: Система единиц (default: DECIMAL)

    Returns:
        Строка вида "1 byte", "512 bytes", "2.75 GB", "2.56 GiB"

    Raises:
        InvalidInput: Если num_bytes отрицательный или не int

    Examples:
        >>> natural_size(2747829994)
        '2.75 GB'
        >>> natural_size(2747829994, UnitSystem.BINARY)
        '2.56 GiB'
        >>> natural_size(1)
        '1 byte'
    """
    validate_non_negative_int(num_bytes, "num_bytes")
    system = UnitSystem(system)

    base = unit_base(system)
    labels = unit_labels(system)

    if num_bytes == 1:
        return "1 byte"
    if num_bytes < base:
        return f"{num_bytes} bytes"

    last = len(labels) - 1
    index = last
    for i in range(len(labels)):
        if num_bytes < base ** (i + 2):
            index = i
            break

    value = exact_ratio(num_bytes, base ** (index + 1))
    if index < last and round_half_up(value, SIZE_PRECISION) >= base:
        logger.debug("natural_size: %d rounds up from %s", num_bytes, labels[index])
        index += 1
        value = exact_ratio(num_bytes, base ** (index + 1))

    return f"{format_rounded(value, SIZE_PRECISION)} {labels[index]}"
