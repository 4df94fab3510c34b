from __future__ import annotations

from typing import Optional, Protocol

from .model import Settings


class SettingsRepository(Protocol):
    def load(self) -> Optional[Settings]:
        """Stored settings, or None before the first save."""

        raise NotImplementedError

    def save(self, settings: Settings) -> None:
        raise NotImplementedError
