from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional

from ..accounting.day import day_totals
from ..accounting.display import day_color, month_total_color
from ..accounting.model import DayTotals
from ..accounting.period import days_in_period, month_plan, sum_period
from ..common.datetime_utils import DateLike, as_date, month_end, to_iso, today_local, week_bounds
from ..entries.repository import EntryRepository
from ..settings.service import SettingsService

CSV_FIELDS = [
    "date",
    "weekend",
    "holiday",
    "workday",
    "entries",
    "hours",
    "normal",
    "over",
    "amount",
]


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    rows: list[dict]
    totals: dict
    plan: Optional[dict] = None
    extra: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        data = {
            "start": to_iso(self.start),
            "end": to_iso(self.end),
            "rows": self.rows,
            "totals": self.totals,
        }
        if self.plan is not None:
            data["plan"] = self.plan
        data.update(self.extra)
        return data


def _row(t: DayTotals) -> dict:
    return {
        "date": to_iso(t.work_date),
        "weekend": t.weekend,
        "holiday": t.holiday,
        "workday": t.workday,
        "entries": t.entry_count,
        "hours": round(t.h_day, 2),
        "normal": round(t.normal, 2),
        "over": round(t.over, 2),
        "amount": round(t.amount, 2),
        "color": day_color(t).value,
    }


class LedgerReportService:
    """Week and month read-models built from the accounting functions."""

    def __init__(self, entries: EntryRepository, settings: SettingsService):
        self._entries = entries
        self._settings = settings

    def day(self, work_date: DateLike) -> DayTotals:
        d = as_date(work_date)
        return day_totals(self._entries.list_range(start=d, end=d), d, self._settings.get())

    def week_report(self, anchor: DateLike) -> ReportData:
        """Every day Monday..Sunday, including days without entries."""
        start, end = week_bounds(anchor)
        entries = self._entries.list_range(start=start, end=end)
        settings = self._settings.get()

        rows = [_row(day_totals(entries, start + timedelta(days=i), settings)) for i in range(7)]
        totals = sum_period(entries, start, end, settings)
        return ReportData(start=start, end=end, rows=rows, totals=totals.to_dict())

    def month_report(self, year: int, month: int, *, today: Optional[date] = None) -> ReportData:
        """Only days with entries, plus workday planning for the month."""
        start = date(year, month, 1)
        end = month_end(year, month)
        entries = self._entries.list_range(start=start, end=end)
        settings = self._settings.get()

        rows = [_row(t) for t in days_in_period(entries, start, end, settings)]
        totals = sum_period(entries, start, end, settings)
        plan = month_plan(year, month, today=today or today_local())
        return ReportData(
            start=start,
            end=end,
            rows=rows,
            totals=totals.to_dict(),
            plan=plan.to_dict(),
            extra={"total_color": month_total_color(totals)},
        )
