from __future__ import annotations

from ..model import HourSplit
from .base import HourSplitter


def split_hours(hours: float, threshold: float) -> HourSplit:
    """Up to ``threshold`` is normal, the rest is overtime.

    Total function: a threshold <= 0 makes every hour overtime.
    """
    over = max(0.0, hours - max(0.0, threshold))
    normal = max(0.0, hours - over)
    return HourSplit(normal=normal, over=over)


class ThresholdHourSplitter(HourSplitter):
    """Standard rule: min(hours, threshold) normal, remainder overtime."""

    def split(self, hours: float, threshold: float) -> HourSplit:
        return split_hours(hours, threshold)
