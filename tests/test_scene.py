from __future__ import annotations

import random

from dragon3d.colors import highlight
from dragon3d.levels import PALETTE
from dragon3d.scene import SEGMENT_COUNT, render
from dragon3d.walker import HISTORY


def test_two_active_days_scenario(make_days) -> None:
    days = make_days(366, counts={100: 5, 101: 5})
    svg = render(days, random.Random(1), year=2025)

    assert svg.startswith("<svg ")
    assert svg.endswith("</svg>")
    assert svg.count('class="floor"') == 366
    assert svg.count('class="bar-top"') == 2
    assert svg.count(f'fill="{highlight(PALETTE[4], 0.25)}"') == 2
    assert "Longest 2 days ∙ Current 2 days" in svg
    assert "Peak 5 ∙ Average ~0.03" in svg
    assert ">10</text>" in svg
    assert svg.count('class="legend"') == 5
    assert "2025" in svg


def test_bar_faces_are_painted_shadow_lit_top(make_days) -> None:
    svg = render(make_days(30, counts={10: 3}), random.Random(0))
    shadow = svg.index('class="bar-shadow"')
    lit = svg.index('class="bar-lit"')
    top = svg.index('class="bar-top"')
    assert shadow < lit < top


def test_all_zero_series_has_floor_and_dragon_only(make_days) -> None:
    days = make_days(366)
    svg = render(days, random.Random(5))
    assert "bar-" not in svg
    assert svg.count('class="floor"') == 366
    assert 'id="dragonPath"' in svg
    # tail + body segments + head
    assert svg.count("<animateMotion") == SEGMENT_COUNT + 2


def test_short_walk_omits_dragon(make_days) -> None:
    svg = render(make_days(366, counts={3: 1}), random.Random(0), steps=2)
    assert "dragonPath" not in svg
    assert "<animateMotion" not in svg
    assert 'class="bar-top"' in svg


def test_same_seed_gives_identical_document(make_days) -> None:
    days = make_days(366, counts={i: (i * 13) % 7 for i in range(366)})
    a = render(days, random.Random(99), username="octocat", year=2025)
    b = render(days, random.Random(99), username="octocat", year=2025)
    assert a == b


def test_username_is_escaped(make_days) -> None:
    svg = render(make_days(14), random.Random(0), username="<a&b>")
    assert "<title>&lt;a&amp;b&gt;: 0 contributions</title>" in svg


def test_history_outlasts_the_dragon_body() -> None:
    assert HISTORY > SEGMENT_COUNT
