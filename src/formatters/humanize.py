"""Humanize — единая точка входа для всех форматтеров.

Фасад хранит только неизменяемую конфигурацию и источник "now";
каждый метод делегирует в соответствующую чистую функцию модуля.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, Optional

from src.core.domain.calendar_delta import CalendarDelta
from src.core.domain.units import UnitSystem
from src.core.math.numerical_safeguards import EPS_FRACTION
from src.formatters import calendar_arithmetic, dates, files, number

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HumanizeConfig:
    """Конфигурация форматирования по умолчанию.

    - unit_system: система единиц для natural_size
    - fraction_eps: толерантность цепной дроби для fraction
    - scientific_precision: знаков мантиссы для scientific
    - *_format: strftime-шаблоны дат
    - grouping_separator / decimal_point: разделители comma
    """
    unit_system: UnitSystem = UnitSystem.DECIMAL
    fraction_eps: float = EPS_FRACTION
    scientific_precision: int = number.SCIENTIFIC_PRECISION_DEFAULT
    day_format: str = dates.DEFAULT_DAY_FORMAT
    year_format: str = dates.DEFAULT_YEAR_FORMAT
    date_format: str = dates.DEFAULT_DATE_FORMAT
    now_format: str = dates.DEFAULT_NOW_FORMAT
    grouping_separator: str = ","
    decimal_point: str = "."


class Humanize:
    """Человекочитаемое форматирование чисел, размеров и дат.

    Пример:
        >>> Humanize().natural_size(2747829994)
        '2.75 GB'
        >>> Humanize().ordinal(385)
        '385th'
        >>> Humanize().word(3456782984)
        '3.46 billion'
    """

    def __init__(
        self,
        config: Optional[HumanizeConfig] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        """
        Args:
            config: конфигурация форматирования (default: HumanizeConfig())
            clock: источник текущего момента (default: системные часы)
        """
        self.config = config or HumanizeConfig()
        self.clock = clock or dates.current_instant
        logger.debug("Humanize created with %s", self.config)

    def _now(self, now: Optional[datetime], date: Optional[datetime] = None) -> datetime:
        """now, иначе показание часов в зоне date (naive часы = локальное время)."""
        if now is not None:
            return now
        current = self.clock()
        zone = getattr(date, "tzinfo", None)
        if zone is not None and current.tzinfo is None:
            return current.astimezone(zone)
        return current

    # -------------------------------------------------------------------------
    # Files
    # -------------------------------------------------------------------------

    def natural_size(self, num_bytes: int, system: Optional[UnitSystem] = None) -> str:
        """Размер в байтах: 2747829994 → "2.75 GB"."""
        return files.natural_size(num_bytes, system or self.config.unit_system)

    # -------------------------------------------------------------------------
    # Numbers
    # -------------------------------------------------------------------------

    def ordinal(self, value: int) -> str:
        return number.ordinal(value)

    def comma(self, value: number.Number) -> str:
        """Число с разделителями разрядов: 2858493.49 → "2,858,493.49"."""
        return number.grouped(
            value,
            separator=self.config.grouping_separator,
            decimal_point=self.config.decimal_point,
        )

    def word(self, value: int) -> str:
        return number.word(value)

    def ap_number(self, value: int) -> str:
        """Цифры 0..9 словами (AP style), остальное числом."""
        return number.spelled_digit(value)

    def fraction(self, value: number.Number) -> str:
        return number.as_fraction(value, self.config.fraction_eps)

    def scientific(self, value: number.Number, precision: Optional[int] = None) -> str:
        if precision is None:
            precision = self.config.scientific_precision
        return number.scientific(value, precision)

    def clamp(
        self,
        value: number.Number,
        floor: Optional[number.Number] = None,
        ceil: Optional[number.Number] = None,
    ) -> str:
        return number.clamp(value, floor=floor, ceil=ceil)

    # -------------------------------------------------------------------------
    # Dates
    # -------------------------------------------------------------------------

    def now(self, format: Optional[str] = None) -> str:
        """Текущий момент: "10 Jul, 2021 12:00:00"."""
        return dates.now_string(format or self.config.now_format, self.clock())

    def date(self, date: datetime, format: Optional[str] = None) -> str:
        """Произвольная дата: "10 Jul, 2021"."""
        return dates.format_date(date, format or self.config.date_format)

    def relative_time(self, utc_time: str, now: Optional[datetime] = None) -> str:
        return dates.relative_time(utc_time, now=self._now(now))

    def natural_day(
        self,
        date: datetime,
        format: Optional[str] = None,
        now: Optional[datetime] = None,
    ) -> str:
        return dates.natural_day(
            date,
            now=self._now(now, date),
            format=format or self.config.day_format,
        )

    def natural_date(self, date: datetime, now: Optional[datetime] = None) -> str:
        return dates.natural_date(
            date,
            now=self._now(now, date),
            day_format=self.config.day_format,
            year_format=self.config.year_format,
        )

    def natural_time(self, date: datetime, now: Optional[datetime] = None) -> str:
        return dates.natural_time(date, now=self._now(now, date))

    # -------------------------------------------------------------------------
    # Calendar arithmetic
    # -------------------------------------------------------------------------

    def add_delta(self, instant: datetime, delta: CalendarDelta) -> datetime:
        return calendar_arithmetic.add_delta(instant, delta)

    def subtract_delta(self, instant: datetime, delta: CalendarDelta) -> datetime:
        return calendar_arithmetic.subtract_delta(instant, delta)
