# stats.py
# Numbers for the summary panel.

from dataclasses import dataclass


@dataclass(frozen=True)
class Summary:
    total: int
    max: int
    average: float
    current: int  # length of the most recent run of active days
    best: int     # longest run of active days


def summarize(days):
    counts = [d.count for d in days]
    total = sum(counts)
    peak = max(counts, default=0)
    average = total / max(1, len(counts))

    run = 0
    current = 0
    best = 0
    for c in counts:
        if c > 0:
            run += 1
            current = run
            best = max(best, run)
        else:
            run = 0
    return Summary(total=total, max=peak, average=average, current=current, best=best)
