"""
Units — Шкалы единиц для размеров в байтах и крупных чисел

Единственный источник констант для магнитудных шкал:
- UnitSystem: decimal (1000) / binary (1024) / memory (alias binary)
- Метки единиц для каждой системы
- Лестница степеней десяти для word()

ЗАПРЕЩЕНО дублировать эти таблицы в форматтерах.
"""

from enum import Enum
from typing import Final


# =============================================================================
# ENUMS
# =============================================================================


class UnitSystem(str, Enum):
    """Система единиц для размеров файлов"""

    DECIMAL = "decimal"  # 1 KB = 1000 bytes
    BINARY = "binary"  # 1 KiB = 1024 bytes
    MEMORY = "memory"  # сейчас совпадает с binary, отдельный член на будущее


# =============================================================================
# БАЙТОВЫЕ ШКАЛЫ
# =============================================================================

DECIMAL_BASE: Final[int] = 1000
BINARY_BASE: Final[int] = 1024

DECIMAL_LABELS: Final[tuple[str, ...]] = ("KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")
BINARY_LABELS: Final[tuple[str, ...]] = (
    "KiB",
    "MiB",
    "GiB",
    "TiB",
    "PiB",
    "EiB",
    "ZiB",
    "YiB",
)


def unit_base(system: UnitSystem) -> int:
    """
    Основание шкалы для системы единиц.

    Args:
        system: Система единиц

    Returns:
        1000 для DECIMAL, 1024 для BINARY/MEMORY
    """
    if system is UnitSystem.DECIMAL:
        return DECIMAL_BASE
    return BINARY_BASE


def unit_labels(system: UnitSystem) -> tuple[str, ...]:
    """Метки единиц от меньшей к большей (без "bytes")."""
    if system is UnitSystem.DECIMAL:
        return DECIMAL_LABELS
    return BINARY_LABELS


# =============================================================================
# ЛЕСТНИЦА КРУПНЫХ ЧИСЕЛ
# =============================================================================

# (степень десяти, слово); строго по возрастанию
WORD_POWERS: Final[tuple[tuple[int, str], ...]] = (
    (3, "thousand"),
    (6, "million"),
    (9, "billion"),
    (12, "trillion"),
    (15, "quadrillion"),
    (18, "quintillion"),
    (21, "sextillion"),
    (24, "septillion"),
    (27, "octillion"),
    (30, "nonillion"),
    (33, "decillion"),
    (100, "googol"),
)

# Верхняя граница поддерживаемых значений word(): всё, что >= 10**100
GOOGOL_POWER: Final[int] = 100


# =============================================================================
# ПРОЧИЕ ТАБЛИЦЫ
# =============================================================================

ORDINAL_SUFFIXES: Final[tuple[str, ...]] = (
    "th",
    "st",
    "nd",
    "rd",
    "th",
    "th",
    "th",
    "th",
    "th",
    "th",
)

SPELLED_DIGITS: Final[tuple[str, ...]] = (
    "zero",
    "one",
    "two",
    "three",
    "four",
    "five",
    "six",
    "seven",
    "eight",
    "nine",
)

SUPERSCRIPTS: Final[dict[str, str]] = {
    "0": "⁰",
    "1": "¹",
    "2": "²",
    "3": "³",
    "4": "⁴",
    "5": "⁵",
    "6": "⁶",
    "7": "⁷",
    "8": "⁸",
    "9": "⁹",
    "+": "⁺",
    "-": "⁻",
}
