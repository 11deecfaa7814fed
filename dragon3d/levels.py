# levels.py
# Buckets daily counts into 5 intensity levels using quantiles of the
# positive counts, and maps levels onto the red-gold palette.

from dataclasses import dataclass

PALETTE = [
    "#5a2020",  # 0 - empty: dark burgundy
    "#b82e2e",  # 1 - deep ruby
    "#d94040",  # 2 - crimson
    "#e8823a",  # 3 - rose-gold
    "#f5c842",  # 4 - gold
]

QUANTILES = (0.35, 0.65, 0.88)


@dataclass(frozen=True)
class Thresholds:
    q1: int
    q2: int
    q3: int
    single_value: bool = False


def quantile_thresholds(counts):
    vals = sorted(c for c in counts if c > 0)
    if not vals:
        return None

    def pick(q):
        # nearest rank
        return vals[int((len(vals) - 1) * q)]

    q1, q2, q3 = (pick(q) for q in QUANTILES)
    return Thresholds(q1, q2, q3, single_value=vals[0] == vals[-1])


def classify(count, thresholds):
    if count <= 0 or thresholds is None:
        return 0
    if thresholds.single_value:
        # only one distinct positive value: it is the peak
        return 4
    if count <= thresholds.q1:
        return 1
    if count <= thresholds.q2:
        return 2
    if count <= thresholds.q3:
        return 3
    return 4


class Classifier:
    def __init__(self, counts):
        self.thresholds = quantile_thresholds(counts)

    def level(self, count):
        return classify(count, self.thresholds)

    def color(self, count):
        return PALETTE[self.level(count)]
