from __future__ import annotations

from datetime import date, timedelta

import pytest

from dragon3d.days import (
    ActivityDay,
    Grid,
    GridCell,
    align_sunday,
    build_days,
    contribution_window,
    diff_days,
    sunday_index,
)


def test_sunday_index_and_alignment() -> None:
    sunday = date(2025, 6, 15)
    assert sunday_index(sunday) == 0
    assert sunday_index(sunday + timedelta(days=6)) == 6
    assert align_sunday(sunday + timedelta(days=3)) == sunday
    assert align_sunday(sunday) == sunday


@pytest.mark.parametrize("duration,lookback", [("full-year", 365), ("half-year", 180)])
def test_contribution_window_aligns_to_preceding_sunday(duration: str, lookback: int) -> None:
    end = date(2025, 6, 18)
    start, out_end = contribution_window(end, duration)
    assert out_end == end
    assert sunday_index(start) == 0
    assert start <= end - timedelta(days=lookback)
    assert diff_days(end - timedelta(days=lookback), start) < 7


def test_contribution_window_rejects_unknown_duration() -> None:
    with pytest.raises(ValueError):
        contribution_window(date(2025, 6, 18), "decade")


def test_build_days_is_contiguous_and_defaults_to_zero() -> None:
    start = date(2024, 6, 9)
    end = date(2025, 6, 18)
    days = build_days({date(2024, 6, 10): 3, date(2025, 1, 1): -2}, start, end)

    assert len(days) == diff_days(end, start) + 1
    assert days[0] == ActivityDay(start, 0)
    assert days[1].count == 3
    assert all(b.day - a.day == timedelta(days=1) for a, b in zip(days, days[1:]))
    assert all(d.count >= 0 for d in days)


def test_grid_cells_cover_window_bijectively(make_days) -> None:
    days = make_days(372, start=date(2024, 6, 9))
    grid = Grid(days)
    cells = grid.cells()

    assert grid.total_weeks == 54
    assert len(set(cells)) == len(days)
    assert all(0 <= c.week < grid.total_weeks and 0 <= c.dow <= 6 for c in cells)
    # most recent week is column 0
    assert grid.cell_of(days[-1].day).week == 0
    assert grid.cell_of(days[0].day) == GridCell(grid.total_weeks - 1, 0)


def test_grid_count_lookup(make_days) -> None:
    days = make_days(14, counts={3: 7}, start=date(2024, 6, 9))
    grid = Grid(days)
    cell = grid.cell_of(days[3].day)
    assert cell == GridCell(1, 3)
    assert grid.count_at(1, 3) == 7
    assert grid.is_active(1, 3)
    assert not grid.is_active(0, 3)
    assert grid.max_count == 7
    assert not grid.contains(2, 0)
    assert not grid.contains(0, 7)


def test_grid_rejects_empty_series() -> None:
    with pytest.raises(ValueError):
        Grid([])
