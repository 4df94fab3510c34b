from __future__ import annotations

from ..model import HourSplit
from ..rates import EffectiveRates
from ..splitter.base import HourSplitter
from .base import DayPolicy


class WorkdayPolicy(DayPolicy):
    """Workday: threshold split, normal part at the base rate, rest at the overtime rate."""

    def split_day(self, *, h_day: float, threshold: float, splitter: HourSplitter) -> HourSplit:
        return splitter.split(h_day, threshold)

    def price(self, *, normal: float, over: float, rates: EffectiveRates) -> float:
        return normal * rates.rate + over * rates.rate_over
