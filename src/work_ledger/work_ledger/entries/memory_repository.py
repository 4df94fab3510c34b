from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from .model import Entry
from .repository import EntryRepository


class InMemoryEntryRepository(EntryRepository):
    """Process-local store keyed by entry id (used by tests and STORAGE=memory)."""

    def __init__(self, entries: Optional[Sequence[Entry]] = None):
        self._by_id: dict[str, Entry] = {}
        for entry in entries or ():
            self._by_id[entry.entry_id] = entry

    def get_by_id(self, entry_id: str) -> Optional[Entry]:
        return self._by_id.get(entry_id)

    def add(self, entry: Entry) -> str:
        self._by_id[entry.entry_id] = entry
        return entry.entry_id

    def update(self, entry: Entry) -> bool:
        if entry.entry_id not in self._by_id:
            return False
        self._by_id[entry.entry_id] = entry
        return True

    def delete(self, entry_id: str) -> bool:
        return self._by_id.pop(entry_id, None) is not None

    def list_range(self, *, start: date, end: date) -> Sequence[Entry]:
        items = [e for e in self._by_id.values() if start <= e.work_date <= end]
        items.sort(key=lambda e: (e.work_date, e.entry_id))
        return items

    def list_all(self) -> Sequence[Entry]:
        return sorted(self._by_id.values(), key=lambda e: (e.work_date, e.entry_id))
