"""Example: use the accounting functions and services without Flask or MySQL."""

from datetime import date

from src.work_ledger.work_ledger.container import build_container
from src.work_ledger.work_ledger.core.enums import StorageKind


def main():
    container = build_container(storage=StorageKind.MEMORY)
    container.settings_service.save(rate=8, rate_over=12, rate_weekend=10, threshold=8)

    container.entry_service.log_entry(work_date=date(2025, 6, 2), hours=10, activity="Site survey")
    container.entry_service.log_entry(work_date=date(2025, 6, 7), hours=5, activity="Reports")

    week = container.report_service.week_report(date(2025, 6, 2))
    print(week.to_dict()["totals"])

    month = container.report_service.month_report(2025, 6, today=date(2025, 6, 10))
    print(month.to_dict()["plan"])


if __name__ == "__main__":
    main()
