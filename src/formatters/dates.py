"""
Natural Time — Dates relative to "now"

Классификация момента относительно текущего:
- natural_day: "Today" / "Yesterday" / "Tomorrow" / форматированная дата
- natural_date: как natural_day, но с годом для дат дальше ~5 месяцев
- natural_time: "A moment ago", "N seconds ago", "A minute from now",
  "3 hours ago"
- relative_time: ISO-8601 строка → "2 days ago" / "in 3 weeks"

"now" всегда инжектируется параметром; по умолчанию используются
системные часы (current_instant). Форматы задаются strftime-шаблоном
в каждом вызове, глобального состояния нет.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. natural_day сравнивает календарные компоненты (год, месяц, день)
2. natural_time и relative_time считают по прошедшему времени,
   а не по компонентам часа/минуты/секунды
3. Некорректная ISO-строка → InvalidInput, без падения
"""

from datetime import datetime, timezone, tzinfo
from typing import Final, Optional

from src.core.errors import InvalidInput

# =============================================================================
# ФОРМАТЫ ПО УМОЛЧАНИЮ
# =============================================================================

DEFAULT_DAY_FORMAT: Final[str] = "%d %b"
DEFAULT_YEAR_FORMAT: Final[str] = "%d %b, %Y"
DEFAULT_DATE_FORMAT: Final[str] = "%d %b, %Y"
DEFAULT_NOW_FORMAT: Final[str] = "%d %b, %Y %H:%M:%S"

# Разница месяцев (now.month - date.month), после которой natural_date
# добавляет год
NATURAL_DATE_YEAR_THRESHOLD_MONTHS: Final[int] = 4

SECONDS_PER_MINUTE: Final[int] = 60
SECONDS_PER_HOUR: Final[int] = 3600

# Единицы relative_time от крупной к мелкой (месяц и год усреднены)
RELATIVE_UNITS: Final[tuple[tuple[str, int], ...]] = (
    ("year", 365 * 86400),
    ("month", 30 * 86400),
    ("week", 7 * 86400),
    ("day", 86400),
    ("hour", 3600),
    ("minute", 60),
    ("second", 1),
)


# =============================================================================
# ЧАСЫ И БАЗОВЫЙ ФОРМАТ
# =============================================================================


def current_instant(tz: Optional[tzinfo] = None) -> datetime:
    """Текущий момент по системным часам (naive local, если tz не задан)."""
    return datetime.now(tz)


def format_date(date: datetime, format: str = DEFAULT_DATE_FORMAT) -> str:
    """
    Дата по strftime-шаблону.

    Examples:
        >>> format_date(datetime(2021, 7, 10))
        '10 Jul, 2021'
    """
    return date.strftime(format)


def now_string(format: str = DEFAULT_NOW_FORMAT, now: Optional[datetime] = None) -> str:
    """Текущий момент как строка, например "10 Jul, 2021 12:00:00"."""
    if now is None:
        now = current_instant()
    return format_date(now, format)


def _resolve_now(date: datetime, now: Optional[datetime]) -> datetime:
    if not isinstance(date, datetime):
        raise InvalidInput(f"date must be a datetime, got {date!r}")
    if now is None:
        return current_instant(date.tzinfo)
    return now


def _elapsed_seconds(date: datetime, now: datetime) -> int:
    try:
        delta = now - date
    except TypeError as e:
        raise InvalidInput(
            "date and now must both be naive or both be timezone-aware"
        ) from e
    return int(delta.total_seconds())


# =============================================================================
# NATURAL DAY / DATE
# =============================================================================


def natural_day(
    date: datetime,
    now: Optional[datetime] = None,
    format: str = DEFAULT_DAY_FORMAT,
) -> str:
    """
    "Today", "Yesterday" или "Tomorrow", иначе дата по format.

    Сравниваются только календарные компоненты: если год или месяц
    различаются, всегда возвращается форматированная дата (31 января
    относительно 1 февраля — это "31 Jan", а не "Yesterday").

    Args:
        date: Классифицируемый момент
        now: Текущий момент (default: системные часы)
        format: strftime-шаблон для остальных дат (default: "%d %b")

    Returns:
        Естественное название дня или форматированная дата

    Examples:
        >>> natural_day(datetime(2021, 7, 9), now=datetime(2021, 7, 10))
        'Yesterday'
        >>> natural_day(datetime(2021, 7, 1), now=datetime(2021, 7, 10))
        '01 Jul'
    """
    now = _resolve_now(date, now)

    if date.year == now.year and date.month == now.month:
        difference = now.day - date.day
        if difference == 0:
            return "Today"
        if difference == 1:
            return "Yesterday"
        if difference == -1:
            return "Tomorrow"

    return format_date(date, format)


def natural_date(
    date: datetime,
    now: Optional[datetime] = None,
    day_format: str = DEFAULT_DAY_FORMAT,
    year_format: str = DEFAULT_YEAR_FORMAT,
) -> str:
    """
    Как natural_day, но с годом для дат больше ~5 месяцев назад.

    Порог сравнивает номера месяцев (now.month - date.month > 4), а не
    прошедшее время: дата из декабря прошлого года относительно января
    отображается без года.
    """
    now = _resolve_now(date, now)

    if now.month - date.month > NATURAL_DATE_YEAR_THRESHOLD_MONTHS:
        return natural_day(date, now, year_format)
    return natural_day(date, now, day_format)


# =============================================================================
# NATURAL TIME
# =============================================================================


def natural_time(date: datetime, now: Optional[datetime] = None) -> str:
    """
    Время относительно now в подходящем разрешении.

    Разрешение выбирается по прошедшему времени (с усечением к нулю):
    - 0 секунд → "A moment ago"
    - < 1 минуты → "N seconds ago" / "N seconds from now"
    - < 1 часа → "A minute ago" / "N minutes ago" / "... from now"
    - иначе → "An hour ago" / "N hours ago" / "... from now"

    Args:
        date: Момент времени
        now: Текущий момент (default: системные часы)

    Returns:
        Естественное описание разницы

    Raises:
        InvalidInput: Если date/now смешивают naive и aware datetime

    Examples:
        >>> natural_time(datetime(2021, 7, 10, 8), now=datetime(2021, 7, 10, 12))
        '4 hours ago'
        >>> natural_time(datetime(2021, 7, 10, 12, 1), now=datetime(2021, 7, 10, 12))
        'A minute from now'
    """
    now = _resolve_now(date, now)
    seconds = _elapsed_seconds(date, now)

    if seconds == 0:
        return "A moment ago"

    direction = "ago" if seconds > 0 else "from now"
    magnitude = abs(seconds)

    if magnitude < SECONDS_PER_MINUTE:
        unit = "second" if magnitude == 1 else "seconds"
        return f"{magnitude} {unit} {direction}"

    if magnitude < SECONDS_PER_HOUR:
        minutes = magnitude // SECONDS_PER_MINUTE
        if minutes == 1:
            return f"A minute {direction}"
        return f"{minutes} minutes {direction}"

    hours = magnitude // SECONDS_PER_HOUR
    if hours == 1:
        return f"An hour {direction}"
    return f"{hours} hours {direction}"


# =============================================================================
# ISO-8601 / RELATIVE TIME
# =============================================================================


def parse_iso_instant(text: str) -> datetime:
    """
    Разбор ISO-8601 строки с явной ошибкой вместо падения.

    Суффикс "Z" понимается как UTC. Строка без смещения считается UTC.

    Args:
        text: Например "2021-07-09T04:32:27Z"

    Returns:
        Timezone-aware datetime

    Raises:
        InvalidInput: Если строка не является ISO-8601 моментом
    """
    if not isinstance(text, str):
        raise InvalidInput(f"ISO-8601 time must be a string, got {text!r}")

    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as e:
        raise InvalidInput(f"Malformed ISO-8601 time: {text!r}") from e

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def relative_time(utc_time: str, now: Optional[datetime] = None) -> str:
    """
    Относительное время для ISO-8601 строки: "2 days ago", "in 3 hours".

    Выбирается крупнейшая единица, в которой разница >= 1
    (год = 365 дней, месяц = 30 дней). Naive now трактуется как
    локальное время.

    Args:
        utc_time: ISO-8601 момент, например "2021-07-09T04:32:27Z"
        now: Текущий момент (default: системные часы, UTC)

    Returns:
        "now", "N units ago" или "in N units"

    Raises:
        InvalidInput: Если utc_time некорректна

    Examples:
        >>> relative_time("2021-07-09T04:32:27Z",
        ...               now=datetime(2021, 7, 11, 4, 32, 27, tzinfo=timezone.utc))
        '2 days ago'
    """
    instant = parse_iso_instant(utc_time)

    if now is None:
        now = current_instant(timezone.utc)
    elif now.tzinfo is None:
        now = now.astimezone()

    seconds = int((instant - now).total_seconds())
    if seconds == 0:
        return "now"

    magnitude = abs(seconds)
    for unit, size in RELATIVE_UNITS:
        if magnitude >= size:
            count = magnitude // size
            break

    label = unit if count == 1 else f"{unit}s"
    if seconds > 0:
        return f"in {count} {label}"
    return f"{count} {label} ago"
