from __future__ import annotations

from dragon3d.colors import dim, highlight


def test_dim_scales_and_clamps() -> None:
    assert dim("#ffffff", 0.5) == "#808080"
    assert dim("#5a2020", 0) == "#000000"
    assert dim("#ffffff", 2) == "#ffffff"
    assert dim("#f5c842", 1) == "#f5c842"


def test_highlight_blends_toward_white() -> None:
    assert highlight("#000000", 0.25) == "#404040"
    assert highlight("#5a2020", 1) == "#ffffff"
    assert highlight("#b82e2e", 0) == "#b82e2e"
