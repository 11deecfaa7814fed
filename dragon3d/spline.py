# spline.py
# Smooth motion guide through the walk's waypoints.

from dataclasses import dataclass

from dragon3d.iso import fmt

MIN_WAYPOINTS = 4
CP1 = 0.4
CP2 = 0.6


@dataclass(frozen=True)
class CubicSegment:
    c1: tuple
    c2: tuple
    end: tuple


@dataclass(frozen=True)
class MotionPath:
    start: tuple
    segments: tuple

    def to_svg(self):
        d = [f"M{fmt(self.start[0])},{fmt(self.start[1])}"]
        for seg in self.segments:
            d.append(
                f"C{fmt(seg.c1[0])},{fmt(seg.c1[1])} "
                f"{fmt(seg.c2[0])},{fmt(seg.c2[1])} "
                f"{fmt(seg.end[0])},{fmt(seg.end[1])}"
            )
        return " ".join(d)


def build_motion_path(waypoints):
    """One cubic per consecutive pair, or None if there are too few points.

    Control points sit at 0.4 and 0.6 of the horizontal span; the first keeps
    the previous point's height and the second takes the next point's, so the
    curve eases out of and into every waypoint horizontally.
    """
    pts = [(wp.x, wp.y) for wp in waypoints]
    if len(pts) < MIN_WAYPOINTS:
        return None

    segments = []
    for (px, py), (cx, cy) in zip(pts, pts[1:]):
        segments.append(
            CubicSegment(
                c1=(px + (cx - px) * CP1, py),
                c2=(px + (cx - px) * CP2, cy),
                end=(cx, cy),
            )
        )
    return MotionPath(start=pts[0], segments=tuple(segments))
