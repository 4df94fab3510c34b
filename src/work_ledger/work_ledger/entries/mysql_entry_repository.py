from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, optional_float
from .model import Entry
from .repository import EntryRepository

_COLUMNS = "entry_id, work_date, hours, activity, rate, rate_over, rate_weekend, threshold"


def _to_entry(r: Dict[str, Any]) -> Entry:
    return Entry(
        entry_id=str(r["entry_id"]),
        work_date=r["work_date"],
        hours=float(r["hours"] or 0),
        activity=r.get("activity") or "",
        rate=optional_float(r.get("rate")),
        rate_over=optional_float(r.get("rate_over")),
        rate_weekend=optional_float(r.get("rate_weekend")),
        threshold=optional_float(r.get("threshold")),
    )


class MySQLEntryRepository(EntryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, entry_id: str) -> Optional[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_entries
                WHERE entry_id=%s
                """,
                (entry_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return _to_entry(r)

    def add(self, entry: Entry) -> str:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO work_entries({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.entry_id,
                    entry.work_date,
                    entry.hours,
                    entry.activity,
                    entry.rate,
                    entry.rate_over,
                    entry.rate_weekend,
                    entry.threshold,
                ),
            )
            return entry.entry_id

    def update(self, entry: Entry) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_entries
                SET hours=%s, activity=%s, rate=%s, rate_over=%s, rate_weekend=%s, threshold=%s
                WHERE entry_id=%s
                """,
                (
                    entry.hours,
                    entry.activity,
                    entry.rate,
                    entry.rate_over,
                    entry.rate_weekend,
                    entry.threshold,
                    entry.entry_id,
                ),
            )
            return cur.rowcount > 0

    def delete(self, entry_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_entries WHERE entry_id=%s", (entry_id,))
            return cur.rowcount > 0

    def list_range(self, *, start: date, end: date) -> Sequence[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_entries
                WHERE work_date BETWEEN %s AND %s
                ORDER BY work_date ASC, entry_id ASC
                """,
                (start, end),
            )
            return [_to_entry(r) for r in fetchall(cur)]

    def list_all(self) -> Sequence[Entry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM work_entries
                ORDER BY work_date ASC, entry_id ASC
                """
            )
            return [_to_entry(r) for r in fetchall(cur)]
