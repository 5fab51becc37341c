"""
Тесты для Natural Time — Dates relative to "now"

Проверяет:
1. natural_day: Today / Yesterday / Tomorrow / форматированная дата
2. natural_date: год для дат дальше ~5 месяцев (по номеру месяца)
3. natural_time: секунды / минуты / часы по прошедшему времени
4. parse_iso_instant: явная ошибка вместо падения
5. relative_time: крупнейшая единица, прошлое и будущее
"""

from datetime import datetime, timedelta, timezone

import pytest

from src.core.errors import InvalidInput
from src.formatters.dates import (
    format_date,
    natural_date,
    natural_day,
    natural_time,
    now_string,
    parse_iso_instant,
    relative_time,
)

NOW = datetime(2021, 7, 10, 12, 0, 0)
NOW_UTC = datetime(2021, 7, 11, 4, 32, 27, tzinfo=timezone.utc)


# =============================================================================
# FORMAT DATE / NOW
# =============================================================================


class TestFormatDate:
    """Тесты для format_date и now_string"""

    def test_default_format(self) -> None:
        assert format_date(datetime(2021, 7, 10)) == "10 Jul, 2021"

    def test_custom_format(self) -> None:
        assert format_date(datetime(2021, 7, 10), "%Y-%m-%d") == "2021-07-10"

    def test_now_string(self) -> None:
        assert now_string(now=NOW) == "10 Jul, 2021 12:00:00"
        assert now_string("%H:%M", now=NOW) == "12:00"


# =============================================================================
# NATURAL DAY
# =============================================================================


class TestNaturalDay:
    """Тесты для natural_day"""

    def test_today(self) -> None:
        assert natural_day(datetime(2021, 7, 10, 8, 15), now=NOW) == "Today"

    def test_yesterday(self) -> None:
        assert natural_day(datetime(2021, 7, 9, 23, 59), now=NOW) == "Yesterday"

    def test_tomorrow(self) -> None:
        assert natural_day(datetime(2021, 7, 11), now=NOW) == "Tomorrow"

    def test_other_day_same_month(self) -> None:
        assert natural_day(datetime(2021, 7, 1), now=NOW) == "01 Jul"

    def test_custom_format(self) -> None:
        assert natural_day(datetime(2021, 7, 1), now=NOW, format="%Y-%m-%d") == "2021-07-01"

    def test_different_month_never_relative(self) -> None:
        """30 июня относительно 1 июля — не "Yesterday" (сравнение компонент)"""
        assert natural_day(datetime(2021, 6, 30), now=datetime(2021, 7, 1)) == "30 Jun"

    def test_different_year_same_month(self) -> None:
        assert natural_day(datetime(2020, 7, 10), now=NOW) == "10 Jul"

    def test_symmetry(self) -> None:
        """Tomorrow(d, now) ⇔ Yesterday(now, d) в пределах одного месяца"""
        later = datetime(2021, 7, 11)
        assert natural_day(later, now=NOW) == "Tomorrow"
        assert natural_day(NOW, now=later) == "Yesterday"

    def test_non_datetime_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="date must be a datetime"):
            natural_day("2021-07-10", now=NOW)  # type: ignore[arg-type]


# =============================================================================
# NATURAL DATE
# =============================================================================


class TestNaturalDate:
    """Тесты для natural_date"""

    def test_recent_relative(self) -> None:
        assert natural_date(datetime(2021, 7, 11), now=NOW) == "Tomorrow"

    def test_more_than_four_months_back_includes_year(self) -> None:
        assert natural_date(datetime(2021, 1, 5), now=NOW) == "05 Jan, 2021"

    def test_four_months_back_without_year(self) -> None:
        assert natural_date(datetime(2021, 3, 10), now=NOW) == "10 Mar"

    def test_month_number_comparison_across_year(self) -> None:
        """Порог считается по номерам месяцев: декабрь → январь без года"""
        assert natural_date(datetime(2021, 12, 20), now=datetime(2022, 1, 10)) == "20 Dec"

    def test_custom_formats(self) -> None:
        result = natural_date(
            datetime(2021, 1, 5), now=NOW, day_format="%d.%m", year_format="%d.%m.%Y"
        )
        assert result == "05.01.2021"


# =============================================================================
# NATURAL TIME
# =============================================================================


class TestNaturalTime:
    """Тесты для natural_time"""

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (timedelta(0), "A moment ago"),
            (timedelta(milliseconds=500), "A moment ago"),
            (timedelta(seconds=1), "1 second ago"),
            (timedelta(seconds=30), "30 seconds ago"),
            (timedelta(seconds=60), "A minute ago"),
            (timedelta(seconds=90), "A minute ago"),
            (timedelta(minutes=5), "5 minutes ago"),
            (timedelta(minutes=59, seconds=59), "59 minutes ago"),
            (timedelta(hours=1), "An hour ago"),
            (timedelta(hours=4), "4 hours ago"),
            (timedelta(hours=50), "50 hours ago"),
        ],
    )
    def test_past(self, offset: timedelta, expected: str) -> None:
        assert natural_time(NOW - offset, now=NOW) == expected

    @pytest.mark.parametrize(
        "offset, expected",
        [
            (timedelta(seconds=1), "1 second from now"),
            (timedelta(seconds=30), "30 seconds from now"),
            (timedelta(minutes=1), "A minute from now"),
            (timedelta(minutes=10), "10 minutes from now"),
            (timedelta(hours=1), "An hour from now"),
            (timedelta(hours=2), "2 hours from now"),
        ],
    )
    def test_future(self, offset: timedelta, expected: str) -> None:
        assert natural_time(NOW + offset, now=NOW) == expected

    def test_across_midnight_uses_elapsed_time(self) -> None:
        """23:58 → 00:02 следующего дня — это 4 минуты, а не разница компонент"""
        date = datetime(2021, 7, 9, 23, 58)
        now = datetime(2021, 7, 10, 0, 2)
        assert natural_time(date, now=now) == "4 minutes ago"

    def test_across_hour_boundary(self) -> None:
        date = datetime(2021, 7, 10, 10, 59)
        now = datetime(2021, 7, 10, 11, 1)
        assert natural_time(date, now=now) == "2 minutes ago"

    def test_aware_datetimes(self) -> None:
        now = datetime(2021, 7, 10, 12, tzinfo=timezone.utc)
        date = datetime(2021, 7, 10, 13, tzinfo=timezone(timedelta(hours=3)))
        assert natural_time(date, now=now) == "2 hours ago"

    def test_naive_aware_mix_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="naive"):
            natural_time(datetime(2021, 7, 10, tzinfo=timezone.utc), now=NOW)


# =============================================================================
# ISO-8601 / RELATIVE TIME
# =============================================================================


class TestParseIsoInstant:
    """Тесты для parse_iso_instant"""

    def test_zulu_suffix(self) -> None:
        expected = datetime(2021, 7, 9, 4, 32, 27, tzinfo=timezone.utc)
        assert parse_iso_instant("2021-07-09T04:32:27Z") == expected

    def test_explicit_offset(self) -> None:
        result = parse_iso_instant("2021-07-09T06:32:27+02:00")
        assert result == datetime(2021, 7, 9, 4, 32, 27, tzinfo=timezone.utc)

    def test_naive_string_is_utc(self) -> None:
        result = parse_iso_instant("2021-07-09T04:32:27")
        assert result.tzinfo is timezone.utc

    @pytest.mark.parametrize("text", ["", "not a date", "2021-13-45T00:00:00Z", "yesterday"])
    def test_malformed_rejected(self, text: str) -> None:
        with pytest.raises(InvalidInput, match="Malformed ISO-8601 time"):
            parse_iso_instant(text)

    def test_non_string_rejected(self) -> None:
        with pytest.raises(InvalidInput, match="must be a string"):
            parse_iso_instant(None)  # type: ignore[arg-type]


class TestRelativeTime:
    """Тесты для relative_time"""

    @pytest.mark.parametrize(
        "utc_time, expected",
        [
            ("2021-07-11T04:32:27Z", "now"),
            ("2021-07-11T04:32:20Z", "7 seconds ago"),
            ("2021-07-11T04:31:27Z", "1 minute ago"),
            ("2021-07-09T04:32:27Z", "2 days ago"),
            ("2021-06-27T04:32:27Z", "2 weeks ago"),
            ("2021-05-27T04:32:27Z", "1 month ago"),
            ("2020-06-01T00:00:00Z", "1 year ago"),
            ("2021-07-11T07:32:27Z", "in 3 hours"),
            ("2021-07-12T04:32:27Z", "in 1 day"),
        ],
    )
    def test_units(self, utc_time: str, expected: str) -> None:
        assert relative_time(utc_time, now=NOW_UTC) == expected

    def test_malformed_rejected(self) -> None:
        with pytest.raises(InvalidInput):
            relative_time("2021-07-09 at noon", now=NOW_UTC)
