from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class HourSplit:
    normal: float
    over: float


@dataclass(frozen=True)
class EntryAllocation:
    """One entry's share of the day's normal/overtime split and its pay."""

    entry_id: str
    hours: float
    share: float
    normal: float
    over: float
    amount: float

    def to_dict(self) -> dict:
        return {
            "entry_id": self.entry_id,
            "hours": self.hours,
            "share": self.share,
            "normal": self.normal,
            "over": self.over,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class DayTotals:
    """Read-model for one date (derived on demand, never stored)."""

    work_date: date
    weekend: bool
    holiday: bool
    workday: bool
    h_day: float = 0.0
    normal: float = 0.0
    over: float = 0.0
    amount: float = 0.0
    threshold: float = 0.0
    allocations: tuple[EntryAllocation, ...] = field(default_factory=tuple)

    @property
    def entry_count(self) -> int:
        return len(self.allocations)

    def to_dict(self) -> dict:
        return {
            "date": to_iso(self.work_date),
            "weekend": self.weekend,
            "holiday": self.holiday,
            "workday": self.workday,
            "h_day": self.h_day,
            "normal": self.normal,
            "over": self.over,
            "amount": self.amount,
            "threshold": self.threshold,
            "entries": [a.to_dict() for a in self.allocations],
        }


@dataclass(frozen=True)
class PeriodTotals:
    total: float = 0.0
    normal: float = 0.0
    over: float = 0.0
    amount: float = 0.0

    def to_dict(self) -> dict:
        return {
            "total": self.total,
            "normal": self.normal,
            "over": self.over,
            "amount": self.amount,
        }


@dataclass(frozen=True)
class MonthPlan:
    """Workday counts used by the month planning view."""

    year: int
    month: int
    workdays: int
    required_hours: int
    remaining_workdays: int
    remaining_hours: int

    def to_dict(self) -> dict:
        return {
            "year": self.year,
            "month": self.month,
            "workdays": self.workdays,
            "required_hours": self.required_hours,
            "remaining_workdays": self.remaining_workdays,
            "remaining_hours": self.remaining_hours,
        }
