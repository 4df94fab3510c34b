from __future__ import annotations

from datetime import date

import pytest

from src.work_ledger.work_ledger.entries.memory_repository import InMemoryEntryRepository
from src.work_ledger.work_ledger.entries.model import Entry
from src.work_ledger.work_ledger.settings.model import Settings


@pytest.fixture
def fixed_today() -> date:
    # Wednesday
    return date(2025, 6, 11)


@pytest.fixture
def settings() -> Settings:
    return Settings(rate=8.0, rate_over=12.0, rate_weekend=10.0, threshold=8.0)


@pytest.fixture
def make_entry():
    counter = {"n": 0}

    def _make(work_date, hours, **kwargs) -> Entry:
        counter["n"] += 1
        if isinstance(work_date, str):
            work_date = date.fromisoformat(work_date)
        return Entry(entry_id=kwargs.pop("entry_id", f"e_{counter['n']}"), work_date=work_date, hours=hours, **kwargs)

    return _make


@pytest.fixture
def entries_repo() -> InMemoryEntryRepository:
    return InMemoryEntryRepository()
