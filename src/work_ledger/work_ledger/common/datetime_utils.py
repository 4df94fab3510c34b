from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Union

from ..core.constants import ISO_DATE_FORMAT

DateLike = Union[date, str]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, ISO_DATE_FORMAT).date()


def as_date(value: DateLike) -> date:
    """Accept either a date or an ISO string; datetimes are cut to their calendar day."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value).strip())


def to_iso(value: DateLike) -> str:
    return as_date(value).strftime(ISO_DATE_FORMAT)


def today_local() -> date:
    """Current local calendar day.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def iter_dates(start: date, end: date) -> Iterator[date]:
    """Yield every calendar day in [start, end]."""
    current = start
    while current <= end:
        yield current
        current += timedelta(days=1)


def week_bounds(value: DateLike) -> tuple[date, date]:
    """Monday..Sunday of the week containing ``value``."""
    d = as_date(value)
    start = d - timedelta(days=d.weekday())
    return start, start + timedelta(days=6)


def month_bounds(value: DateLike) -> tuple[date, date]:
    d = as_date(value)
    last_day = calendar.monthrange(d.year, d.month)[1]
    return date(d.year, d.month, 1), date(d.year, d.month, last_day)


def month_end(year: int, month: int) -> date:
    return date(year, month, calendar.monthrange(year, month)[1])
