from __future__ import annotations

from datetime import date

import pytest

from src.work_ledger.work_ledger.core.exceptions import NotFoundError, ValidationError
from src.work_ledger.work_ledger.entries.memory_repository import InMemoryEntryRepository
from src.work_ledger.work_ledger.entries.service import EntryService, new_entry_id
from src.work_ledger.work_ledger.settings.memory_repository import InMemorySettingsRepository
from src.work_ledger.work_ledger.settings.model import Settings
from src.work_ledger.work_ledger.settings.service import SettingsService


def _ids():
    n = {"i": 0}

    def _next():
        n["i"] += 1
        return f"e_{n['i']}"

    return _next


def _service(settings: Settings | None = None):
    repo = InMemoryEntryRepository()
    settings_service = SettingsService(InMemorySettingsRepository(settings or Settings(rate=8, rate_over=12, threshold=8)))
    return EntryService(repo, settings_service, id_factory=_ids()), settings_service, repo


def test_log_entry_snapshots_current_settings():
    svc, _, repo = _service()

    entry_id = svc.log_entry(work_date="2025-06-02", hours="7,5", activity="  Survey  ")

    entry = repo.get_by_id(entry_id)
    assert entry.work_date == date(2025, 6, 2)
    assert entry.hours == 7.5
    assert entry.activity == "Survey"
    assert (entry.rate, entry.rate_over, entry.rate_weekend, entry.threshold) == (8, 12, 12, 8)


def test_later_settings_change_does_not_touch_old_entries():
    svc, settings_service, repo = _service()
    entry_id = svc.log_entry(work_date="2025-06-02", hours=8)

    settings_service.save(rate=20, rate_over=30, threshold=6)

    assert repo.get_by_id(entry_id).rate == 8
    assert repo.get_by_id(entry_id).threshold == 8


@pytest.mark.parametrize("hours", [0, -1, "abc", "", None])
def test_log_entry_rejects_non_positive_hours(hours):
    svc, _, repo = _service()

    with pytest.raises(ValidationError):
        svc.log_entry(work_date="2025-06-02", hours=hours)
    assert repo.list_all() == []


def test_log_entry_rejects_bad_date():
    svc, _, _ = _service()

    with pytest.raises(ValidationError):
        svc.log_entry(work_date="02.06.2025", hours=8)


def test_log_standard_day():
    svc, _, repo = _service()

    entry_id = svc.log_standard_day(today=date(2025, 6, 11))

    entry = repo.get_by_id(entry_id)
    assert entry.hours == 8
    assert entry.work_date == date(2025, 6, 11)


def test_update_hours_keeps_id_and_rates():
    svc, _, repo = _service()
    entry_id = svc.log_entry(work_date="2025-06-02", hours=8, activity="a")

    svc.update_hours(entry_id, hours=9, activity="b")

    entry = repo.get_by_id(entry_id)
    assert (entry.hours, entry.activity, entry.rate) == (9, "b", 8)


def test_update_rates_changes_only_given_fields():
    svc, _, repo = _service()
    entry_id = svc.log_entry(work_date="2025-06-07", hours=4)

    svc.update_rates(entry_id, rate_weekend="15")

    entry = repo.get_by_id(entry_id)
    assert (entry.rate, entry.rate_over, entry.rate_weekend) == (8, 12, 15)


def test_update_rates_rejects_non_positive():
    svc, _, _ = _service()
    entry_id = svc.log_entry(work_date="2025-06-02", hours=4)

    with pytest.raises(ValidationError):
        svc.update_rates(entry_id, rate=0)


def test_unknown_entry_raises_not_found():
    svc, _, _ = _service()

    with pytest.raises(NotFoundError):
        svc.update_hours("missing", hours=3)
    with pytest.raises(NotFoundError):
        svc.delete("missing")


def test_delete_removes_entry():
    svc, _, repo = _service()
    entry_id = svc.log_entry(work_date="2025-06-02", hours=4)

    svc.delete(entry_id)

    assert repo.get_by_id(entry_id) is None


def test_list_range_is_inclusive():
    svc, _, _ = _service()
    svc.log_entry(work_date="2025-06-01", hours=1)
    svc.log_entry(work_date="2025-06-15", hours=2)
    svc.log_entry(work_date="2025-07-01", hours=3)

    items = svc.list_range(start="2025-06-01", end="2025-06-30")

    assert [e.hours for e in items] == [1, 2]


def test_generated_ids_are_unique():
    ids = {new_entry_id() for _ in range(200)}
    assert len(ids) == 200
    assert all(i.startswith("e_") for i in ids)


def test_rejected_update_leaves_entry_unchanged():
    svc, _, repo = _service()
    entry_id = svc.log_entry(work_date="2025-06-02", hours=8, activity="a")

    with pytest.raises(ValidationError):
        svc.update(entry_id, hours=10, activity="b", rate=-5)

    entry = repo.get_by_id(entry_id)
    assert (entry.hours, entry.activity, entry.rate) == (8, "a", 8)
