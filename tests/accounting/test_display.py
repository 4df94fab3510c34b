from datetime import date

from src.work_ledger.work_ledger.accounting.display import day_color, month_total_color
from src.work_ledger.work_ledger.accounting.model import DayTotals, PeriodTotals
from src.work_ledger.work_ledger.core.enums import DayColor


def _totals(h_day, *, weekend=False, holiday=False, workday=True):
    return DayTotals(work_date=date(2025, 6, 2), weekend=weekend, holiday=holiday, workday=workday, h_day=h_day)


def test_empty_day_is_neutral_even_on_holiday():
    assert day_color(_totals(0)) == DayColor.NEUTRAL
    assert day_color(_totals(0, holiday=True, workday=False)) == DayColor.NEUTRAL


def test_weekend_or_holiday_with_hours():
    assert day_color(_totals(2, weekend=True, workday=False)) == DayColor.OVER_WORKED
    assert day_color(_totals(8, holiday=True, workday=False)) == DayColor.OVER_WORKED


def test_workday_colors():
    assert day_color(_totals(7.5)) == DayColor.UNDER
    assert day_color(_totals(8)) == DayColor.MET
    assert day_color(_totals(8 + 1e-12)) == DayColor.MET
    assert day_color(_totals(8 - 1e-12)) == DayColor.UNDER
    assert day_color(_totals(8.25)) == DayColor.OVER


def test_month_total_color():
    assert month_total_color(PeriodTotals(total=40, normal=40)) == "total-green"
    assert month_total_color(PeriodTotals(total=42, normal=40, over=2)) == "total-orange"
