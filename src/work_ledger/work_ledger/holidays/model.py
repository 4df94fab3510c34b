from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..core.enums import DayKind


@dataclass(frozen=True)
class DayClassification:
    """Calendar facts about one local calendar day."""

    work_date: date
    weekend: bool
    holiday: bool
    workday: bool

    @property
    def kind(self) -> DayKind:
        if self.weekend or self.holiday:
            return DayKind.WEEKEND_OR_HOLIDAY
        if self.workday:
            return DayKind.WORKDAY
        return DayKind.OTHER
