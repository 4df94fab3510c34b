from __future__ import annotations

from ..model import HourSplit
from ..rates import EffectiveRates
from ..splitter.base import HourSplitter
from .base import DayPolicy


class FallbackPolicy(DayPolicy):
    """Neither workday nor weekend/holiday (also used for empty weekend days).

    Same outcome as the weekend rule: all hours overtime at the weekend rate.
    """

    def split_day(self, *, h_day: float, threshold: float, splitter: HourSplitter) -> HourSplit:
        return HourSplit(normal=0.0, over=h_day)

    def price(self, *, normal: float, over: float, rates: EffectiveRates) -> float:
        return over * rates.rate_weekend
