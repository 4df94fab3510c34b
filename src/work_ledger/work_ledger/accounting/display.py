from __future__ import annotations

from ..core.constants import HOURS_EPSILON, STANDARD_DAY_HOURS
from ..core.enums import DayColor
from .model import DayTotals, PeriodTotals


def day_color(totals: DayTotals) -> DayColor:
    """Week card color.

    Workday: under 8h blue, exactly 8h green, above orange.
    Weekend/holiday with hours: orange. No hours: gray.
    """
    if totals.h_day == 0:
        return DayColor.NEUTRAL
    if totals.weekend or totals.holiday:
        return DayColor.OVER_WORKED
    if totals.workday:
        if totals.h_day < STANDARD_DAY_HOURS:
            return DayColor.UNDER
        if abs(totals.h_day - STANDARD_DAY_HOURS) < HOURS_EPSILON:
            return DayColor.MET
    return DayColor.OVER


def month_total_color(totals: PeriodTotals) -> str:
    """Month summary: green while no overtime was logged."""
    return "total-orange" if totals.over > 0 else "total-green"
