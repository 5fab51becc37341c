"""
Domain value types.

Contains the value objects shared by all formatters: unit systems and
magnitude ladders, Fraction, CalendarDelta.
"""

from src.core.domain.calendar_delta import CalendarDelta
from src.core.domain.fraction import Fraction
from src.core.domain.units import (
    BINARY_BASE,
    BINARY_LABELS,
    DECIMAL_BASE,
    DECIMAL_LABELS,
    GOOGOL_POWER,
    ORDINAL_SUFFIXES,
    SPELLED_DIGITS,
    SUPERSCRIPTS,
    WORD_POWERS,
    UnitSystem,
    unit_base,
    unit_labels,
)

__all__ = [
    # Units module
    "BINARY_BASE",
    "BINARY_LABELS",
    "DECIMAL_BASE",
    "DECIMAL_LABELS",
    "GOOGOL_POWER",
    "ORDINAL_SUFFIXES",
    "SPELLED_DIGITS",
    "SUPERSCRIPTS",
    "WORD_POWERS",
    "UnitSystem",
    "unit_base",
    "unit_labels",
    # Fraction model
    "Fraction",
    # CalendarDelta model
    "CalendarDelta",
]
