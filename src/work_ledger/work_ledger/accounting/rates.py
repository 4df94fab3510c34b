"""Rate and threshold resolution.

Every place that needs an effective rate goes through the chains below, so
the day calculation and any display of "the rate of this entry" agree:

    rate         = entry.rate         -> settings.rate         -> 0
    rate_over    = entry.rate_over    -> settings.rate_over    -> rate
    rate_weekend = entry.rate_weekend -> settings.rate_weekend -> rate_over
    threshold    = first entry's threshold -> settings.threshold -> 8

A step is skipped only when its value is absent (None, blank or unparseable);
an explicit 0 is kept.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional, Sequence

from ..common.validators import parse_number, parse_optional_number
from ..core.constants import DEFAULT_THRESHOLD_HOURS
from ..entries.model import Entry
from ..settings.model import Settings


@dataclass(frozen=True)
class EffectiveRates:
    rate: float
    rate_over: float
    rate_weekend: float


@dataclass(frozen=True)
class RateSnapshot:
    """Values copied onto a new entry from the current settings."""

    rate: float
    rate_over: float
    rate_weekend: float
    threshold: float


def first_present(*candidates: Any) -> Optional[float]:
    for candidate in candidates:
        value = parse_optional_number(candidate)
        if value is not None:
            return value
    return None


def resolve_rates(entry: Entry, settings: Settings) -> EffectiveRates:
    rate = first_present(entry.rate, settings.rate)
    rate = 0.0 if rate is None else rate

    rate_over = first_present(entry.rate_over, settings.rate_over)
    rate_over = rate if rate_over is None else rate_over

    rate_weekend = first_present(entry.rate_weekend, settings.rate_weekend)
    rate_weekend = rate_over if rate_weekend is None else rate_weekend

    return EffectiveRates(rate=rate, rate_over=rate_over, rate_weekend=rate_weekend)


def resolve_threshold(entries: Sequence[Entry], settings: Settings) -> float:
    first = entries[0].threshold if entries else None
    threshold = first_present(first, settings.threshold)
    return DEFAULT_THRESHOLD_HOURS if threshold is None else threshold


def snapshot_rates(settings: Settings) -> RateSnapshot:
    """Rates for a newly logged entry.

    The weekend rate snapshot falls back through the overtime rate and then the
    normal rate; it does not depend on whether the entry's date is a weekend.
    """
    rate = parse_number(settings.rate)
    rate_over = first_present(settings.rate_over, settings.rate)
    rate_weekend = first_present(settings.rate_weekend, settings.rate_over, settings.rate)
    threshold = parse_number(settings.threshold)
    return RateSnapshot(
        rate=rate,
        rate_over=rate_over or 0.0,
        rate_weekend=rate_weekend or 0.0,
        threshold=threshold or DEFAULT_THRESHOLD_HOURS,
    )
