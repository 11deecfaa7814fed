# iso.py
# Isometric projection of the (week, day-of-week) grid and bar extrusion.
#
# The week axis runs right+down and the day axis left+down, so painting cells
# sorted by (week, dow) ascending draws far geometry before near geometry.
# Nothing here removes hidden surfaces; callers must respect that order.

# geometry
CELL_W = 13       # horizontal spacing per cell
CELL_H = 6.5      # vertical spacing per cell
MAX_BAR_H = 40    # extrude height of the busiest day
ORIGIN_X = 950 * 0.25
ORIGIN_Y = 50


def fmt(v):
    # compact, stable number formatting for SVG attributes
    s = f"{v:.2f}".rstrip("0").rstrip(".")
    return "0" if s == "-0" else s


def poly_to_str(poly):
    return " ".join(f"{fmt(px)},{fmt(py)}" for px, py in poly)


def project(week, dow):
    x = ORIGIN_X + (week - dow) * CELL_W
    y = ORIGIN_Y + (week + dow) * CELL_H
    return x, y


def bar_height(count, max_count):
    if max_count <= 0 or count <= 0:
        return 0.0
    return count / max_count * MAX_BAR_H


def elevate(point, height):
    x, y = point
    return x, y - height


def floor_tile(x, y):
    # diamond at floor level centred on (x, y)
    return [
        (x, y - CELL_H),
        (x + CELL_W, y),
        (x, y + CELL_H),
        (x - CELL_W, y),
    ]


def top_polygon(x, y, height):
    return floor_tile(*elevate((x, y), height))


def bar_faces(x, y, height):
    # returns shadow (right), lit (left) and top faces, in paint order
    hw, hh, h = CELL_W, CELL_H, height
    shadow = [
        (x, y + hh - h),
        (x + hw, y - h),
        (x + hw, y),
        (x, y + hh),
    ]
    lit = [
        (x - hw, y - h),
        (x, y + hh - h),
        (x, y + hh),
        (x - hw, y),
    ]
    return shadow, lit, top_polygon(x, y, height)


def paint_order(cells):
    return sorted(cells, key=lambda c: (c.week, c.dow))
