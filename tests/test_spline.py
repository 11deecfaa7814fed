from __future__ import annotations

import pytest

from dragon3d.days import GridCell
from dragon3d.spline import build_motion_path
from dragon3d.walker import Waypoint


def _wps(points):
    return [Waypoint(GridCell(i, 0), x, y, 0.0) for i, (x, y) in enumerate(points)]


def test_too_few_waypoints_give_no_path() -> None:
    assert build_motion_path([]) is None
    assert build_motion_path(_wps([(0, 0), (10, 5), (20, 0)])) is None


def test_one_cubic_per_pair_with_eased_controls() -> None:
    path = build_motion_path(_wps([(0, 0), (10, 5), (20, 0), (30, 10)]))
    assert path.start == (0, 0)
    assert len(path.segments) == 3

    first = path.segments[0]
    assert first.c1 == pytest.approx((4, 0))
    assert first.c2 == pytest.approx((6, 5))
    assert first.end == (10, 5)


def test_svg_description_is_stable() -> None:
    wps = _wps([(237.5, 82.5), (250.5, 89), (263.5, 95.5), (276.5, 62)])
    a = build_motion_path(wps).to_svg()
    b = build_motion_path(list(wps)).to_svg()
    assert a == b
    assert a.startswith("M237.5,82.5 C242.7,82.5 245.3,89 250.5,89")
    assert a.count("C") == 3
