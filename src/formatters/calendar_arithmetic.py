"""
Calendar Arithmetic — Date + CalendarDelta

Применение календарного смещения к моменту времени покомпонентно,
а не через число прошедших секунд.

ПРАВИЛО НОРМАЛИЗАЦИИ:
1. year и month сворачиваются в общее число месяцев и раскладываются
   обратно через divmod (месяц 13 → январь следующего года)
2. Остаток (day-of-month, day, hour, minute, second) откладывается
   через timedelta от 1-го числа целевого месяца; переполнение дня
   разрешает сам datetime: 31 января + 1 месяц → 3 марта
   (2 марта в високосный год)

tzinfo и микросекунды исходного момента сохраняются.

subtract_delta не всегда обратна add_delta: месяцы откладываются раньше
дней в обе стороны, поэтому смешанное смещение month + day, пересекающее
месяц другой длины, не возвращается к исходной дате.
"""

import logging
from datetime import datetime, timedelta

from src.core.domain.calendar_delta import CalendarDelta
from src.core.errors import InvalidInput, Unrepresentable

logger = logging.getLogger(__name__)


def add_delta(instant: datetime, delta: CalendarDelta) -> datetime:
    """
    Новый момент: instant, сдвинутый на delta по календарным компонентам.

    Args:
        instant: Исходный момент (не изменяется)
        delta: Календарное смещение

    Returns:
        Новый datetime

    Raises:
        InvalidInput: Если instant не datetime
        Unrepresentable: Если результат вне диапазона datetime

    Examples:
        >>> add_delta(datetime(2021, 1, 31), CalendarDelta(month=1))
        datetime.datetime(2021, 3, 3, 0, 0)
        >>> add_delta(datetime(2021, 12, 15), CalendarDelta(month=1))
        datetime.datetime(2022, 1, 15, 0, 0)
    """
    if not isinstance(instant, datetime):
        raise InvalidInput(f"instant must be a datetime, got {instant!r}")

    if delta.is_zero:
        return instant

    months = (instant.year + delta.year) * 12 + (instant.month - 1) + delta.month
    year, month_index = divmod(months, 12)

    try:
        anchor = instant.replace(year=year, month=month_index + 1, day=1)
        result = anchor + timedelta(
            days=instant.day - 1 + delta.day,
            hours=delta.hour,
            minutes=delta.minute,
            seconds=delta.second,
        )
    except (ValueError, OverflowError) as e:
        raise Unrepresentable(
            f"{instant.isoformat()} shifted by {delta!r} is outside the supported calendar range"
        ) from e

    clock_shift = delta.day or delta.hour or delta.minute or delta.second
    if not clock_shift and result.day != instant.day:
        logger.debug(
            "add_delta: day %d does not exist in %04d-%02d, rolled over to %s",
            instant.day,
            year,
            month_index + 1,
            result.date().isoformat(),
        )

    return result


def subtract_delta(instant: datetime, delta: CalendarDelta) -> datetime:
    """Новый момент: instant, сдвинутый на -delta (см. add_delta)."""
    return add_delta(instant, -delta)


def interval_between(lhs: datetime, rhs: datetime) -> float:
    """
    Прошедшее время lhs - rhs в секундах (знаковое).

    Examples:
        >>> interval_between(datetime(2021, 1, 1, 0, 1), datetime(2021, 1, 1))
        60.0
    """
    return (lhs - rhs).total_seconds()
