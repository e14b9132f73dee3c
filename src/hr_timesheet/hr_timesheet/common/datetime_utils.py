from __future__ import annotations

from datetime import date, datetime, timedelta
from typing import Iterator


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar date from start to end inclusive.

    An inverted range yields nothing.
    """
    # never step past end: date.max + 1 day overflows
    for offset in range((end - start).days + 1):
        yield start + timedelta(days=offset)


def weekday_label(day: date) -> str:
    """Vietnamese weekday label: "CN - 7" for Sunday, "T2 - 8" for Monday ... "T7 - 13"."""
    # date.weekday(): Monday=0 .. Sunday=6; shift to Sunday=0 .. Saturday=6
    dow = (day.weekday() + 1) % 7
    if dow == 0:
        return f"CN - {day.day}"
    return f"T{dow + 1} - {day.day}"


def format_log_time(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%d %H:%M")


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
