from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import DayKind
from ..holidays.model import DayClassification
from .strategies.base import DayPolicy
from .strategies.fallback_strategy import FallbackPolicy
from .strategies.weekend_strategy import WeekendHolidayPolicy
from .strategies.workday_strategy import WorkdayPolicy


@dataclass
class DayPolicyFactory:
    """Factory Pattern: choose the day policy, first matching rule wins.

    1. weekend or holiday with logged hours
    2. workday
    3. anything else
    """

    def for_day(self, *, day: DayClassification, h_day: float) -> DayPolicy:
        if day.kind == DayKind.WEEKEND_OR_HOLIDAY and h_day > 0:
            return WeekendHolidayPolicy()
        if day.kind == DayKind.WORKDAY:
            return WorkdayPolicy()
        return FallbackPolicy()
