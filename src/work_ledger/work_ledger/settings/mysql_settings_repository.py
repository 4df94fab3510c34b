from __future__ import annotations

from typing import Optional

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, optional_float
from .model import Settings
from .repository import SettingsRepository

# Single-row table.
SETTINGS_ROW_ID = 1


class MySQLSettingsRepository(SettingsRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def load(self) -> Optional[Settings]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT rate, rate_over, rate_weekend, threshold
                FROM ledger_settings
                WHERE settings_id=%s
                """,
                (SETTINGS_ROW_ID,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return Settings(
                rate=optional_float(r.get("rate")),
                rate_over=optional_float(r.get("rate_over")),
                rate_weekend=optional_float(r.get("rate_weekend")),
                threshold=optional_float(r.get("threshold")),
            )

    def save(self, settings: Settings) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO ledger_settings(settings_id, rate, rate_over, rate_weekend, threshold)
                VALUES(%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    rate=VALUES(rate),
                    rate_over=VALUES(rate_over),
                    rate_weekend=VALUES(rate_weekend),
                    threshold=VALUES(threshold)
                """,
                (SETTINGS_ROW_ID, settings.rate, settings.rate_over, settings.rate_weekend, settings.threshold),
            )
