import pytest

from src.work_ledger.work_ledger.accounting.splitter.threshold_splitter import ThresholdHourSplitter, split_hours


def test_split_below_threshold_is_all_normal():
    sp = split_hours(6, 8)
    assert sp.normal == 6
    assert sp.over == 0


def test_split_above_threshold():
    sp = split_hours(10.5, 8)
    assert sp.normal == 8
    assert sp.over == pytest.approx(2.5)


def test_split_exact_threshold():
    sp = split_hours(8, 8)
    assert (sp.normal, sp.over) == (8, 0)


def test_non_positive_threshold_is_all_overtime():
    assert split_hours(5, 0).over == 5
    assert split_hours(5, 0).normal == 0
    assert split_hours(5, -3).over == 5
    assert split_hours(5, -3).normal == 0


def test_split_always_adds_up():
    for h in [0, 0.25, 1, 7.75, 8, 8.01, 12, 24]:
        for t in [0, 4, 7.5, 8, 10]:
            sp = split_hours(h, t)
            assert sp.normal + sp.over == pytest.approx(h)
            if h <= t:
                assert sp.over == 0
            else:
                assert sp.normal == pytest.approx(t)


def test_splitter_class_delegates():
    assert ThresholdHourSplitter().split(9, 8) == split_hours(9, 8)
