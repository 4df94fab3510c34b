from __future__ import annotations

from enum import Enum


class DayColor(str, Enum):
    """Display color of a day card (kept independent from rendering)."""

    NEUTRAL = "bg-gray"
    UNDER = "bg-blue"
    MET = "bg-green"
    OVER = "bg-orange"
    OVER_WORKED = "bg-orange-weekend"


class DayKind(str, Enum):
    """Kind of day, used to pick the hour/amount policy."""

    WORKDAY = "WORKDAY"
    WEEKEND_OR_HOLIDAY = "WEEKEND_OR_HOLIDAY"
    OTHER = "OTHER"


class StorageKind(str, Enum):
    MYSQL = "mysql"
    MEMORY = "memory"
