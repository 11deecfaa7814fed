# days.py
# Contribution day series and the (week, day-of-week) grid it maps onto.

from dataclasses import dataclass
from datetime import date, timedelta

LOOKBACK = {
    "full-year": 365,
    "half-year": 180,
}


@dataclass(frozen=True)
class ActivityDay:
    day: date
    count: int


@dataclass(frozen=True)
class GridCell:
    week: int  # 0 = most recent week
    dow: int   # Sunday = 0 .. Saturday = 6


def diff_days(a, b):
    return (a - b).days


def date_range(start, end):
    cur = start
    while cur <= end:
        yield cur
        cur += timedelta(days=1)


def sunday_index(d):
    # date.weekday() is Monday=0; GitHub columns start on Sunday
    return (d.weekday() + 1) % 7


def align_sunday(d):
    return d - timedelta(days=sunday_index(d))


def contribution_window(end, duration="full-year"):
    if duration not in LOOKBACK:
        raise ValueError(f"Unknown duration {duration!r}")
    start = align_sunday(end - timedelta(days=LOOKBACK[duration]))
    return start, end


def build_days(counts, start, end):
    # dates missing from the source map count as zero
    return tuple(
        ActivityDay(day=d, count=max(0, int(counts.get(d, 0))))
        for d in date_range(start, end)
    )


class Grid:
    """Calendar grid built from a contiguous, ascending day series.

    Week 0 is the column holding the last day; columns grow toward the past.
    """

    def __init__(self, days):
        self.days = tuple(days)
        if not self.days:
            raise ValueError("Grid needs at least one day")
        self.start = align_sunday(self.days[0].day)
        self.end = self.days[-1].day
        self._span = diff_days(self.end, self.start) // 7
        self.total_weeks = self._span + 1
        self.max_count = max(d.count for d in self.days)
        self._counts = {self.cell_of(d.day): d.count for d in self.days}

    def cell_of(self, day):
        week = self._span - diff_days(day, self.start) // 7
        return GridCell(week=week, dow=sunday_index(day))

    def cells(self):
        return [self.cell_of(d.day) for d in self.days]

    def contains(self, week, dow):
        return 0 <= week < self.total_weeks and 0 <= dow <= 6

    def count_at(self, week, dow):
        return self._counts.get(GridCell(week, dow), 0)

    def is_active(self, week, dow):
        return self.count_at(week, dow) > 0
