from __future__ import annotations

from typing import Optional

from .model import Settings
from .repository import SettingsRepository


class InMemorySettingsRepository(SettingsRepository):
    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings

    def load(self) -> Optional[Settings]:
        return self._settings

    def save(self, settings: Settings) -> None:
        self._settings = settings
