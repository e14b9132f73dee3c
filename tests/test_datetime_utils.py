from datetime import date, datetime

import pytest

from src.hr_timesheet.hr_timesheet.common.datetime_utils import (
    format_log_time,
    iter_dates,
    parse_iso_date,
    weekday_label,
)


def test_iter_dates_crosses_month_and_year():
    days = list(iter_dates(date(2025, 12, 30), date(2026, 1, 2)))
    assert days == [date(2025, 12, 30), date(2025, 12, 31), date(2026, 1, 1), date(2026, 1, 2)]


def test_iter_dates_inverted_range_is_empty():
    assert list(iter_dates(date(2026, 1, 2), date(2026, 1, 1))) == []


@pytest.mark.parametrize(
    "day,label",
    [
        (date(2025, 12, 21), "CN - 21"),
        (date(2025, 12, 22), "T2 - 22"),
        (date(2025, 12, 24), "T4 - 24"),
        (date(2025, 12, 27), "T7 - 27"),
        (date(2026, 2, 1), "CN - 1"),
    ],
)
def test_weekday_label(day, label):
    assert weekday_label(day) == label


def test_parse_iso_date_rejects_other_formats():
    assert parse_iso_date("2025-12-24") == date(2025, 12, 24)
    with pytest.raises(ValueError):
        parse_iso_date("24/12/2025")


def test_format_log_time_drops_seconds():
    assert format_log_time(datetime(2026, 1, 5, 7, 3, 59)) == "2026-01-05 07:03"


def test_iter_dates_reaches_last_representable_date():
    assert list(iter_dates(date(9999, 12, 30), date.max)) == [date(9999, 12, 30), date(9999, 12, 31)]
