"""Formatters — человекочитаемое представление чисел, размеров и дат.

Модули:
- files: размеры в байтах
- number: порядковые, разряды, слова, дроби, научная нотация, clamp
- calendar_arithmetic: календарные смещения дат
- dates: Today/Yesterday, "3 hours ago", ISO-8601 relative time
- humanize: фасад Humanize с конфигурацией
"""

import logging

from .files import natural_size
from .number import (
    as_fraction,
    clamp,
    grouped,
    ordinal,
    scientific,
    spelled_digit,
    word,
)
from .calendar_arithmetic import add_delta, interval_between, subtract_delta
from .dates import (
    current_instant,
    format_date,
    natural_date,
    natural_day,
    natural_time,
    now_string,
    parse_iso_instant,
    relative_time,
)
from .humanize import Humanize, HumanizeConfig

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Files
    "natural_size",
    # Numbers
    "as_fraction",
    "clamp",
    "grouped",
    "ordinal",
    "scientific",
    "spelled_digit",
    "word",
    # Calendar arithmetic
    "add_delta",
    "interval_between",
    "subtract_delta",
    # Natural time
    "current_instant",
    "format_date",
    "natural_date",
    "natural_day",
    "natural_time",
    "now_string",
    "parse_iso_instant",
    "relative_time",
    # Facade
    "Humanize",
    "HumanizeConfig",
]
