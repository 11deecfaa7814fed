# walker.py
# Stochastic grid walk that drives the dragon's motion path.
#
# Each step scores the 8 neighbouring cells with a weight table and picks
# one of the best three at random. A FIFO history keeps the walk off cells
# it crossed recently, and moves with negative (dweek - ddow) are ruled out
# so the dragon always advances. That forward test relies on the axis
# mapping in iso.project; re-derive it if the projection changes.

import logging
from collections import deque
from dataclasses import dataclass

from dragon3d.days import GridCell
from dragon3d.iso import bar_height, elevate, project

logger = logging.getLogger(__name__)

STEPS = 80
HISTORY = 32        # must exceed the number of rendered body segments
START = (20, 5)     # open ground behind the recent weeks

# (dweek, ddow): orthogonal then diagonal
MOVES = [
    (1, 0), (-1, 0),
    (0, 1), (0, -1),
    (1, 1), (1, -1),
    (-1, 1), (-1, -1),
]


@dataclass(frozen=True)
class WalkWeights:
    jitter: float = 5.0             # random score in [0, jitter)
    near_zone: int = 8              # weeks <= near_zone get near_bonus
    near_bonus: float = 2.0
    core_zone: int = 4              # weeks <= core_zone get core_bonus on top
    core_bonus: float = 1.0
    bar_bonus: float = 15.0         # candidate cell has contributions
    revisit_penalty: float = 1000.0
    straight_bonus: float = 50.0    # same move as last step
    glide_bonus: float = 30.0       # ... and both cells are empty ground
    bend_bonus: float = 5.0         # shares one component with the last move
    backward_penalty: float = 5000.0
    cutoff: float = -500.0
    top_k: int = 3


@dataclass(frozen=True)
class Waypoint:
    cell: GridCell
    x: float
    y: float
    elevation: float


@dataclass(frozen=True)
class Candidate:
    cell: GridCell
    move: tuple
    score: float


def forward_progress(week, dow):
    return week - dow


def score_move(move, last_move, week, on_bar, from_bar, visited, jitter, weights):
    """Score one candidate move.

    ``week`` is the candidate's week index, ``on_bar``/``from_bar`` tell
    whether the candidate and current cells hold contributions and
    ``visited`` whether the candidate sits in the recent history.
    """
    dw, dd = move
    score = jitter

    if week <= weights.near_zone:
        score += weights.near_bonus
    if week <= weights.core_zone:
        score += weights.core_bonus

    if on_bar:
        score += weights.bar_bonus

    if visited:
        score -= weights.revisit_penalty

    if move == last_move:
        score += weights.straight_bonus
        if not on_bar and not from_bar:
            score += weights.glide_bonus
    elif dw == last_move[0] or dd == last_move[1]:
        score += weights.bend_bonus

    if forward_progress(dw, dd) < 0:
        score -= weights.backward_penalty

    return score


def make_waypoint(grid, week, dow):
    h = bar_height(grid.count_at(week, dow), grid.max_count)
    x, y = elevate(project(week, dow), h)
    return Waypoint(cell=GridCell(week, dow), x=x, y=y, elevation=h)


def candidates(grid, week, dow, last_move, recent, rng, weights):
    from_bar = grid.is_active(week, dow)
    out = []
    for move in MOVES:
        nw, nd = week + move[0], dow + move[1]
        if not grid.contains(nw, nd):
            continue
        score = score_move(
            move,
            last_move,
            week=nw,
            on_bar=grid.is_active(nw, nd),
            from_bar=from_bar,
            visited=(nw, nd) in recent,
            jitter=rng.random() * weights.jitter,
            weights=weights,
        )
        out.append(Candidate(GridCell(nw, nd), move, score))
    return out


def synthesize_path(grid, rng, steps=STEPS, history=HISTORY, start=START, weights=None):
    """Walk the grid and return the visited waypoints, start included.

    A walk that gets trapped before ``steps`` moves returns early with a
    shorter tuple; that is a normal outcome.
    """
    if weights is None:
        weights = WalkWeights()
    if history < 1:
        raise ValueError("history must hold at least one cell")

    week = min(max(start[0], 0), grid.total_weeks - 1)
    dow = min(max(start[1], 0), 6)

    waypoints = [make_waypoint(grid, week, dow)]
    recent = deque([(week, dow)], maxlen=history)
    last_move = (0, 0)

    for step in range(steps):
        scored = candidates(grid, week, dow, last_move, recent, rng, weights)
        valid = sorted(
            (c for c in scored if c.score > weights.cutoff),
            key=lambda c: c.score,
            reverse=True,
        )
        if not valid:
            logger.debug("walk trapped at week=%d dow=%d after %d steps", week, dow, step)
            break

        top = valid[: weights.top_k]
        choice = top[rng.randrange(len(top))]

        week, dow = choice.cell.week, choice.cell.dow
        last_move = choice.move
        recent.append((week, dow))
        waypoints.append(make_waypoint(grid, week, dow))

    logger.debug("walk produced %d waypoints", len(waypoints))
    return tuple(waypoints)
