from __future__ import annotations

from datetime import date, timedelta

import pytest

from dragon3d.days import build_days


@pytest.fixture
def make_days():
    """Build a contiguous day series with counts given by day offset."""

    def _make(n: int = 366, counts: dict[int, int] | None = None, start: date = date(2024, 1, 1)):
        by_date = {start + timedelta(days=i): c for i, c in (counts or {}).items()}
        return build_days(by_date, start, start + timedelta(days=n - 1))

    return _make
