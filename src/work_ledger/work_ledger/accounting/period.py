from __future__ import annotations

from collections import defaultdict
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike, as_date, iter_dates, month_end
from ..core.constants import STANDARD_DAY_HOURS
from ..entries.model import Entry
from ..holidays.calendar import is_workday
from ..settings.model import Settings
from .day import EntryCollection, day_totals, iter_entries
from .model import DayTotals, MonthPlan, PeriodTotals
from .splitter.base import HourSplitter


def group_by_date(entries: EntryCollection, start: DateLike, end: DateLike) -> dict[date, list[Entry]]:
    """Entries in [start, end] grouped by date, only dates that have entries."""
    start_d, end_d = as_date(start), as_date(end)
    by_day: dict[date, list[Entry]] = defaultdict(list)
    for entry in iter_entries(entries):
        d = as_date(entry.work_date)
        if start_d <= d <= end_d:
            by_day[d].append(entry)
    return dict(by_day)


def days_in_period(
    entries: EntryCollection,
    start: DateLike,
    end: DateLike,
    settings: Settings,
    *,
    splitter: Optional[HourSplitter] = None,
) -> list[DayTotals]:
    """Day totals for every date in range that has at least one entry, sorted."""
    by_day = group_by_date(entries, start, end)
    return [day_totals(rows, d, settings, splitter=splitter) for d, rows in sorted(by_day.items())]


def sum_period(
    entries: EntryCollection,
    start: DateLike,
    end: DateLike,
    settings: Settings,
    *,
    splitter: Optional[HourSplitter] = None,
) -> PeriodTotals:
    total = normal = over = amount = 0.0
    for t in days_in_period(entries, start, end, settings, splitter=splitter):
        total += t.h_day
        normal += t.normal
        over += t.over
        amount += t.amount
    return PeriodTotals(total=total, normal=normal, over=over, amount=amount)


def count_workdays_in_month(year: int, month: int) -> int:
    """Workdays in a calendar month; ``month`` is 1-12."""
    start = date(year, month, 1)
    return sum(1 for d in iter_dates(start, month_end(year, month)) if is_workday(d))


def remaining_workdays_from(year: int, month: int, today: DateLike) -> int:
    """Workdays from ``today`` (inclusive) to the end of the month.

    0 when ``today`` is not inside the requested month.
    """
    today_d = as_date(today)
    if today_d.year != year or today_d.month != month:
        return 0
    return sum(1 for d in iter_dates(today_d, month_end(year, month)) if is_workday(d))


def required_hours(workdays: int) -> int:
    return workdays * STANDARD_DAY_HOURS


def month_plan(year: int, month: int, *, today: DateLike) -> MonthPlan:
    workdays = count_workdays_in_month(year, month)
    remaining = remaining_workdays_from(year, month, today)
    return MonthPlan(
        year=year,
        month=month,
        workdays=workdays,
        required_hours=required_hours(workdays),
        remaining_workdays=remaining,
        remaining_hours=required_hours(remaining),
    )
