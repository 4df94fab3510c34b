from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import HourSplit
from ..rates import EffectiveRates
from ..splitter.base import HourSplitter


class DayPolicy(ABC):
    """Strategy Pattern: how a kind of day splits its hours and prices them."""

    @abstractmethod
    def split_day(self, *, h_day: float, threshold: float, splitter: HourSplitter) -> HourSplit:
        raise NotImplementedError

    @abstractmethod
    def price(self, *, normal: float, over: float, rates: EffectiveRates) -> float:
        raise NotImplementedError
