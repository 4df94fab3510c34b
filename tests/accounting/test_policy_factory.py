from datetime import date

from src.work_ledger.work_ledger.accounting.factory import DayPolicyFactory
from src.work_ledger.work_ledger.accounting.strategies.fallback_strategy import FallbackPolicy
from src.work_ledger.work_ledger.accounting.strategies.weekend_strategy import WeekendHolidayPolicy
from src.work_ledger.work_ledger.accounting.strategies.workday_strategy import WorkdayPolicy
from src.work_ledger.work_ledger.holidays.calendar import classify_day
from src.work_ledger.work_ledger.holidays.model import DayClassification


def test_factory_picks_weekend_policy_for_logged_weekend():
    policy = DayPolicyFactory().for_day(day=classify_day("2025-06-07"), h_day=3)
    assert isinstance(policy, WeekendHolidayPolicy)


def test_factory_picks_weekend_policy_for_weekday_holiday():
    policy = DayPolicyFactory().for_day(day=classify_day("2025-11-18"), h_day=8)
    assert isinstance(policy, WeekendHolidayPolicy)


def test_factory_picks_workday_policy():
    policy = DayPolicyFactory().for_day(day=classify_day("2025-06-02"), h_day=0)
    assert isinstance(policy, WorkdayPolicy)


def test_empty_weekend_and_unclassified_days_use_fallback():
    assert isinstance(DayPolicyFactory().for_day(day=classify_day("2025-06-07"), h_day=0), FallbackPolicy)

    odd_day = DayClassification(work_date=date(2025, 6, 2), weekend=False, holiday=False, workday=False)
    policy = DayPolicyFactory().for_day(day=odd_day, h_day=5)
    assert isinstance(policy, FallbackPolicy)
    assert policy.split_day(h_day=5, threshold=8, splitter=None).over == 5
