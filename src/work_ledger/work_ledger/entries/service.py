from __future__ import annotations

import logging
import secrets
from dataclasses import replace
from datetime import date, datetime
from typing import Any, Callable, Optional, Sequence

from ..accounting.rates import snapshot_rates
from ..common.datetime_utils import DateLike, as_date, today_local
from ..common.validators import clean_text, require_optional_positive, require_positive
from ..core.constants import STANDARD_DAY_HOURS
from ..core.exceptions import NotFoundError, ValidationError
from ..settings.service import SettingsService
from .model import Entry
from .repository import EntryRepository

logger = logging.getLogger(__name__)


def new_entry_id() -> str:
    """``e_<epoch millis>_<random>``; the random suffix keeps ids unique within a millisecond."""
    millis = int(datetime.now().timestamp() * 1000)
    return f"e_{millis}_{secrets.token_hex(5)}"


class EntryService:
    """Use case: log, edit and delete work entries.

    Validation lives here; the accounting functions never re-validate.
    """

    def __init__(
        self,
        entries: EntryRepository,
        settings: SettingsService,
        *,
        id_factory: Optional[Callable[[], str]] = None,
    ):
        self._entries = entries
        self._settings = settings
        self._id_factory = id_factory or new_entry_id

    def log_entry(self, *, work_date: Optional[DateLike], hours: Any, activity: Optional[str] = None) -> str:
        try:
            day = as_date(work_date) if work_date else today_local()
        except ValueError as e:
            raise ValidationError("Date must be in YYYY-MM-DD format") from e
        hours = require_positive(hours, "Hours")

        snap = snapshot_rates(self._settings.get())
        entry = Entry(
            entry_id=self._id_factory(),
            work_date=day,
            hours=hours,
            activity=clean_text(activity),
            rate=snap.rate,
            rate_over=snap.rate_over,
            rate_weekend=snap.rate_weekend,
            threshold=snap.threshold,
        )
        entry_id = self._entries.add(entry)
        logger.info("Logged %.2fh on %s (entry %s)", hours, day, entry_id)
        return entry_id

    def log_standard_day(self, *, today: Optional[date] = None) -> str:
        """Quick action: add a standard 8-hour entry for today."""
        return self.log_entry(work_date=today or today_local(), hours=STANDARD_DAY_HOURS)

    def get(self, entry_id: str) -> Entry:
        entry = self._entries.get_by_id(entry_id)
        if not entry:
            raise NotFoundError(f"Entry {entry_id} not found")
        return entry

    def update(
        self,
        entry_id: str,
        *,
        hours: Any = None,
        activity: Optional[str] = None,
        rate: Any = None,
        rate_over: Any = None,
        rate_weekend: Any = None,
    ) -> Entry:
        """Edit an entry in one save; None keeps the stored value.

        Every field is validated before anything is written, so a rejected
        edit leaves the entry untouched.
        """
        entry = self.get(entry_id)
        changes = {}
        if hours is not None:
            changes["hours"] = require_positive(hours, "Hours")
        if activity is not None:
            changes["activity"] = clean_text(activity)
        for field_name, value, label in (
            ("rate", rate, "Rate"),
            ("rate_over", rate_over, "Overtime rate"),
            ("rate_weekend", rate_weekend, "Weekend rate"),
        ):
            number = require_optional_positive(value, label)
            if number is not None:
                changes[field_name] = number

        if not changes:
            return entry

        updated = replace(entry, **changes)
        self._save(updated)
        logger.info("Entry %s updated: %s", entry_id, changes)
        return updated

    def update_hours(self, entry_id: str, *, hours: Any = None, activity: Optional[str] = None) -> Entry:
        return self.update(entry_id, hours=hours, activity=activity)

    def update_rates(
        self,
        entry_id: str,
        *,
        rate: Any = None,
        rate_over: Any = None,
        rate_weekend: Any = None,
    ) -> Entry:
        """Change individual rate snapshots; omitted fields keep their value."""
        return self.update(entry_id, rate=rate, rate_over=rate_over, rate_weekend=rate_weekend)

    def delete(self, entry_id: str) -> None:
        if not self._entries.delete(entry_id):
            raise NotFoundError(f"Entry {entry_id} not found")
        logger.info("Entry %s deleted", entry_id)

    def list_range(self, *, start: DateLike, end: DateLike) -> Sequence[Entry]:
        return self._entries.list_range(start=as_date(start), end=as_date(end))

    def list_all(self) -> Sequence[Entry]:
        return self._entries.list_all()

    def _save(self, entry: Entry) -> None:
        if not self._entries.update(entry):
            raise NotFoundError(f"Entry {entry.entry_id} not found")
