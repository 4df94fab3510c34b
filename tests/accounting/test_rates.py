from datetime import date

from src.work_ledger.work_ledger.accounting.rates import first_present, resolve_rates, snapshot_rates
from src.work_ledger.work_ledger.entries.model import Entry
from src.work_ledger.work_ledger.settings.model import Settings


def test_first_present_skips_absent_but_keeps_zero():
    assert first_present(None, "", "abc", 3) == 3
    assert first_present(0, 5) == 0
    assert first_present("7,5") == 7.5
    assert first_present(None, None) is None


def test_entry_snapshot_wins_over_settings():
    entry = Entry(entry_id="e", work_date=date(2025, 6, 2), hours=8, rate=9, rate_over=13, rate_weekend=20)

    rates = resolve_rates(entry, Settings(rate=1, rate_over=2, rate_weekend=3))

    assert (rates.rate, rates.rate_over, rates.rate_weekend) == (9, 13, 20)


def test_fallback_chain_without_any_values():
    entry = Entry(entry_id="e", work_date=date(2025, 6, 2), hours=8)

    rates = resolve_rates(entry, Settings(rate=None, rate_over=None, rate_weekend=None))

    assert (rates.rate, rates.rate_over, rates.rate_weekend) == (0, 0, 0)


def test_overtime_and_weekend_fall_back_down_the_chain():
    entry = Entry(entry_id="e", work_date=date(2025, 6, 2), hours=8, rate=6)

    rates = resolve_rates(entry, Settings(rate=1, rate_over=None, rate_weekend=None))

    assert (rates.rate, rates.rate_over, rates.rate_weekend) == (6, 6, 6)


def test_snapshot_rates_defaults():
    snap = snapshot_rates(Settings(rate=8, rate_over=None, rate_weekend=None, threshold=None))

    assert snap.rate == 8
    assert snap.rate_over == 8
    assert snap.rate_weekend == 8
    assert snap.threshold == 8


def test_snapshot_weekend_rate_prefers_overtime_rate():
    snap = snapshot_rates(Settings(rate=8, rate_over=12, rate_weekend=None, threshold=7))

    assert snap.rate_weekend == 12
    assert snap.threshold == 7
