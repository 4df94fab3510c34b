from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.enums import StorageKind
from .database.connection import DBConfig, DatabaseConnection
from .entries.memory_repository import InMemoryEntryRepository
from .entries.mysql_entry_repository import MySQLEntryRepository
from .entries.repository import EntryRepository
from .entries.service import EntryService
from .reports.service import LedgerReportService
from .settings.memory_repository import InMemorySettingsRepository
from .settings.mysql_settings_repository import MySQLSettingsRepository
from .settings.repository import SettingsRepository
from .settings.service import SettingsService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    entries_repo: EntryRepository
    settings_repo: SettingsRepository

    settings_service: SettingsService
    entry_service: EntryService
    report_service: LedgerReportService


def build_container(*, db_config: Optional[dict] = None, storage: StorageKind | str = StorageKind.MYSQL) -> Container:
    storage = StorageKind(storage)

    conn: Optional[DatabaseConnection] = None
    if storage == StorageKind.MYSQL:
        if db_config is None:
            raise ValueError("db_config is required for MySQL storage")
        conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
        entries_repo: EntryRepository = MySQLEntryRepository(conn)
        settings_repo: SettingsRepository = MySQLSettingsRepository(conn)
    else:
        entries_repo = InMemoryEntryRepository()
        settings_repo = InMemorySettingsRepository()

    settings_service = SettingsService(settings_repo)
    entry_service = EntryService(entries_repo, settings_service)
    report_service = LedgerReportService(entries_repo, settings_service)

    return Container(
        conn=conn,
        entries_repo=entries_repo,
        settings_repo=settings_repo,
        settings_service=settings_service,
        entry_service=entry_service,
        report_service=report_service,
    )
