from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from ..core.constants import DEFAULT_RATE, DEFAULT_THRESHOLD_HOURS


@dataclass(frozen=True)
class Settings:
    """Process-wide defaults copied onto new entries.

    ``rate_over`` falls back to ``rate`` and ``rate_weekend`` to ``rate_over``
    when left empty.
    """

    rate: Optional[float] = DEFAULT_RATE
    rate_over: Optional[float] = None
    rate_weekend: Optional[float] = None
    threshold: Optional[float] = DEFAULT_THRESHOLD_HOURS

    def to_dict(self) -> dict:
        return asdict(self)
