from __future__ import annotations

from dragon3d.levels import PALETTE, Classifier, classify, quantile_thresholds


def test_no_positive_counts_means_level_zero() -> None:
    assert quantile_thresholds([0, 0, 0]) is None
    assert classify(0, None) == 0
    assert classify(12, None) == 0
    assert Classifier([0] * 10).color(3) == PALETTE[0]


def test_nearest_rank_thresholds() -> None:
    t = quantile_thresholds(list(range(0, 11)))
    assert (t.q1, t.q2, t.q3) == (4, 6, 8)
    assert [classify(c, t) for c in range(0, 11)] == [0, 1, 1, 1, 1, 2, 2, 3, 3, 4, 4]


def test_thresholds_are_ordered() -> None:
    t = quantile_thresholds([9, 1, 1, 30, 2, 2, 7, 0, 3, 15, 4])
    assert t.q1 <= t.q2 <= t.q3


def test_classify_is_monotone() -> None:
    counts = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55]
    t = quantile_thresholds(counts)
    levels = [classify(c, t) for c in range(0, 60)]
    assert levels[0] == 0
    assert levels == sorted(levels)
    assert max(levels) == 4


def test_single_positive_value_is_peak() -> None:
    counts = [0] * 364 + [5, 5]
    t = quantile_thresholds(counts)
    assert (t.q1, t.q2, t.q3) == (5, 5, 5)
    c = Classifier(counts)
    assert c.level(5) == 4
    assert c.level(0) == 0
    assert c.color(5) == PALETTE[4]
