from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import to_iso


@dataclass(frozen=True)
class Entry:
    """Domain entity: hours worked on one date, with rate snapshots.

    The rate and threshold fields are copied from Settings when the entry is
    logged, so later settings changes never alter past pay.
    """

    entry_id: str
    work_date: date
    hours: float
    activity: str = ""
    rate: Optional[float] = None
    rate_over: Optional[float] = None
    rate_weekend: Optional[float] = None
    threshold: Optional[float] = None

    def to_dict(self) -> dict:
        data = asdict(self)
        data["work_date"] = to_iso(self.work_date)
        return data
