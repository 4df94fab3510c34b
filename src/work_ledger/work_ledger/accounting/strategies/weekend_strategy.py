from __future__ import annotations

from ..model import HourSplit
from ..rates import EffectiveRates
from ..splitter.base import HourSplitter
from .base import DayPolicy


class WeekendHolidayPolicy(DayPolicy):
    """Weekend or public holiday: every hour is overtime, paid at the weekend rate."""

    def split_day(self, *, h_day: float, threshold: float, splitter: HourSplitter) -> HourSplit:
        return HourSplit(normal=0.0, over=h_day)

    def price(self, *, normal: float, over: float, rates: EffectiveRates) -> float:
        return over * rates.rate_weekend
