from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import HourSplit


class HourSplitter(ABC):
    """Splitter interface (Strategy Pattern for normal/overtime hours)."""

    @abstractmethod
    def split(self, hours: float, threshold: float) -> HourSplit:
        raise NotImplementedError
