from __future__ import annotations

from collections.abc import Mapping
from typing import Iterable, Optional, Union

from ..common.datetime_utils import DateLike, as_date
from ..common.validators import parse_number
from ..entries.model import Entry
from ..holidays.calendar import classify_day
from ..settings.model import Settings
from .factory import DayPolicyFactory
from .model import DayTotals, EntryAllocation
from .rates import resolve_rates, resolve_threshold
from .splitter.base import HourSplitter
from .splitter.threshold_splitter import ThresholdHourSplitter

EntryCollection = Union[Iterable[Entry], Mapping[str, Entry]]


def iter_entries(entries: EntryCollection) -> Iterable[Entry]:
    """Accept either an id -> entry mapping or any iterable of entries."""
    if isinstance(entries, Mapping):
        return entries.values()
    return entries


def entry_hours(entry: Entry) -> float:
    """Hours of an entry; missing or corrupted values count as 0."""
    return parse_number(entry.hours)


def day_totals(
    entries: EntryCollection,
    work_date: DateLike,
    settings: Settings,
    *,
    splitter: Optional[HourSplitter] = None,
    factory: Optional[DayPolicyFactory] = None,
) -> DayTotals:
    """Totals for one date with proportional per-entry rate allocation.

    The day's hours are split once (so the threshold is not applied per entry),
    then every entry receives ``hours / h_day`` of the normal and overtime
    hours and is priced with its own snapshot rates.
    """
    day = as_date(work_date)
    rows = [e for e in iter_entries(entries) if as_date(e.work_date) == day]
    h_day = sum(entry_hours(e) for e in rows)
    threshold = resolve_threshold(rows, settings)

    classification = classify_day(day)
    policy = (factory or DayPolicyFactory()).for_day(day=classification, h_day=h_day)
    split = policy.split_day(h_day=h_day, threshold=threshold, splitter=splitter or ThresholdHourSplitter())

    allocations = []
    amount = 0.0
    for entry in rows:
        hours = entry_hours(entry)
        share = hours / h_day if h_day > 0 else 0.0
        normal_part = split.normal * share
        over_part = split.over * share
        entry_amount = policy.price(normal=normal_part, over=over_part, rates=resolve_rates(entry, settings))
        amount += entry_amount
        allocations.append(
            EntryAllocation(
                entry_id=entry.entry_id,
                hours=hours,
                share=share,
                normal=normal_part,
                over=over_part,
                amount=entry_amount,
            )
        )

    return DayTotals(
        work_date=day,
        weekend=classification.weekend,
        holiday=classification.holiday,
        workday=classification.workday,
        h_day=h_day,
        normal=split.normal,
        over=split.over,
        amount=amount,
        threshold=threshold,
        allocations=tuple(allocations),
    )
