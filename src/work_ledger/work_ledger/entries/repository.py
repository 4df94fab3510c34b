from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Entry


class EntryRepository(Protocol):
    def get_by_id(self, entry_id: str) -> Optional[Entry]:
        raise NotImplementedError

    def add(self, entry: Entry) -> str:
        """Store a new entry. Returns entry_id."""

        raise NotImplementedError

    def update(self, entry: Entry) -> bool:
        """Replace the stored entry with the same id."""

        raise NotImplementedError

    def delete(self, entry_id: str) -> bool:
        raise NotImplementedError

    def list_range(self, *, start: date, end: date) -> Sequence[Entry]:
        raise NotImplementedError

    def list_all(self) -> Sequence[Entry]:
        raise NotImplementedError
