"""Public holiday calendar (Latvia) and workday classification.

All functions are pure functions of their argument and accept either a
``datetime.date`` or a ``YYYY-MM-DD`` string.
"""

from __future__ import annotations

from datetime import date, timedelta
from functools import lru_cache

from ..common.datetime_utils import DateLike, as_date, to_iso
from .model import DayClassification

# (month, day) of fixed-date public holidays.
FIXED_HOLIDAYS: tuple[tuple[int, int], ...] = (
    (1, 1),
    (5, 1),
    (5, 4),
    (6, 23),
    (6, 24),
    (11, 18),
    (12, 24),
    (12, 25),
    (12, 26),
    (12, 31),
)


def easter_sunday(year: int) -> date:
    """Gregorian Easter Sunday (Meeus/Jones/Butcher)."""
    a = year % 19
    b = year // 100
    c = year % 100
    d = b // 4
    e = b % 4
    f = (b + 8) // 25
    g = (b - f + 1) // 3
    h = (19 * a + b - d - g + 15) % 30
    i = c // 4
    k = c % 4
    l = (32 + 2 * e + 2 * i - h - k) % 7
    m = (a + 11 * h + 22 * l) // 451
    month = (h + l - 7 * m + 114) // 31
    day = (h + l - 7 * m + 114) % 31 + 1
    return date(year, month, day)


@lru_cache(maxsize=64)
def holiday_set(year: int) -> frozenset[str]:
    """ISO dates of all public holidays in ``year`` (always 13 of them)."""
    easter = easter_sunday(year)
    days = [date(year, month, day) for month, day in FIXED_HOLIDAYS]
    days.extend(
        [
            easter - timedelta(days=2),  # Good Friday
            easter,
            easter + timedelta(days=1),  # Easter Monday
        ]
    )
    return frozenset(to_iso(d) for d in days)


def is_weekend(value: DateLike) -> bool:
    return as_date(value).weekday() >= 5


def is_holiday(value: DateLike) -> bool:
    d = as_date(value)
    return to_iso(d) in holiday_set(d.year)


def is_workday(value: DateLike) -> bool:
    """Monday-Friday and not a public holiday."""
    d = as_date(value)
    return d.weekday() <= 4 and not is_holiday(d)


def classify_day(value: DateLike) -> DayClassification:
    d = as_date(value)
    return DayClassification(
        work_date=d,
        weekend=is_weekend(d),
        holiday=is_holiday(d),
        workday=is_workday(d),
    )
