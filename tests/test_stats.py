from __future__ import annotations

import pytest

from dragon3d.stats import summarize


def test_two_active_days_in_a_year(make_days) -> None:
    s = summarize(make_days(366, counts={100: 5, 101: 5}))
    assert s.total == 10
    assert s.max == 5
    assert s.average == pytest.approx(0.027, abs=1e-3)
    assert s.current == 2
    assert s.best == 2


def test_streaks_track_latest_and_longest_runs(make_days) -> None:
    s = summarize(make_days(10, counts={0: 1, 1: 2, 2: 1, 5: 4, 9: 1}))
    assert s.best == 3
    assert s.current == 1
    assert s.max == 4
    assert s.total == 9


def test_empty_activity(make_days) -> None:
    s = summarize(make_days(30))
    assert (s.total, s.max, s.current, s.best) == (0, 0, 0, 0)
    assert s.average == 0
    assert summarize([]).average == 0
