from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any, Optional

from ..common.validators import require_optional_positive, require_positive
from .model import Settings
from .repository import SettingsRepository

logger = logging.getLogger(__name__)


class SettingsService:
    """Use case: read and save the ledger-wide default rates."""

    def __init__(self, settings: SettingsRepository):
        self._settings = settings

    def get(self) -> Settings:
        """Stored settings; defaults are created and saved on first use."""
        current = self._settings.load()
        if current is None:
            current = Settings()
            logger.info("Initializing default settings")
        if current.rate_over is None:
            current = replace(current, rate_over=current.rate)
            self._settings.save(current)
        return current

    def save(
        self,
        *,
        rate: Any,
        rate_over: Any,
        threshold: Any,
        rate_weekend: Optional[Any] = None,
    ) -> Settings:
        settings = Settings(
            rate=require_positive(rate, "Rate"),
            rate_over=require_positive(rate_over, "Overtime rate"),
            rate_weekend=require_optional_positive(rate_weekend, "Weekend rate"),
            threshold=require_positive(threshold, "Overtime threshold"),
        )
        self._settings.save(settings)
        logger.info(
            "Settings saved: rate=%s rate_over=%s rate_weekend=%s threshold=%s",
            settings.rate,
            settings.rate_over,
            settings.rate_weekend,
            settings.threshold,
        )
        return settings
