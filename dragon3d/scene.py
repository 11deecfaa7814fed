# scene.py
# Assembles the animated SVG: floor, extruded bars, dragon, stats panel.

import logging
from html import escape

from dragon3d import ornaments
from dragon3d.colors import dim, highlight
from dragon3d.days import Grid
from dragon3d.iso import bar_faces, bar_height, floor_tile, fmt, paint_order, poly_to_str, project
from dragon3d.levels import PALETTE, Classifier
from dragon3d.spline import build_motion_path
from dragon3d.stats import summarize
from dragon3d.walker import HISTORY, STEPS, synthesize_path

logger = logging.getLogger(__name__)

WIDTH = 950
HEIGHT = 440

# dragon animation
PATH_ID = "dragonPath"
ANIM_DUR = "24s"
SEGMENT_COUNT = 24
SEGMENT_DELAY = 0.25

FONT = "system-ui, -apple-system, sans-serif"
SERIF = "'Noto Serif SC', serif"

DEFS = """<defs>
  <linearGradient id="bgGrad" x1="0" y1="0" x2="0" y2="1">
    <stop offset="0%" stop-color="#6b2a2a"/>
    <stop offset="40%" stop-color="#7a3535"/>
    <stop offset="100%" stop-color="#5c1f1f"/>
  </linearGradient>
  <radialGradient id="lanternGlow">
    <stop offset="0%" stop-color="#ff6b3b" stop-opacity="0.6"/>
    <stop offset="100%" stop-color="#ff6b3b" stop-opacity="0"/>
  </radialGradient>
  <filter id="glow">
    <feGaussianBlur stdDeviation="3" result="coloredBlur"/>
    <feMerge>
      <feMergeNode in="coloredBlur"/>
      <feMergeNode in="SourceGraphic"/>
    </feMerge>
  </filter>
  <style>
    .border-glow { animation: borderPulse 8s ease-in-out infinite; }
    @keyframes borderPulse {
      0%   { stroke-opacity: 0.15; }
      50%  { stroke-opacity: 0.35; }
      100% { stroke-opacity: 0.15; }
    }
    .corner-sparkle { animation: sparkle 4s ease-in-out infinite; }
    @keyframes sparkle {
      0%   { opacity: 0.2; }
      50%  { opacity: 0.6; }
      100% { opacity: 0.2; }
    }
  </style>
</defs>"""

DRAGON_TAIL = """<path d="M-2,0 L-10,-4 Q-14,0 -10,4 Z" fill="#c0392b" stroke="#ffd700" stroke-width="0.5"/>
<path d="M-6,0 L-16,-2.5 Q-18,0 -16,2.5 Z" fill="#e74c3c" stroke="#ffd700" stroke-width="0.3" opacity="0.5"/>"""

DRAGON_HEAD = """<rect x="-10" y="-8" width="20" height="16" rx="4" fill="#c0392b" stroke="#ffd700" stroke-width="1"/>
<path d="M-6,-8 Q0,-14 6,-8" fill="#e74c3c" stroke="#ffd700" stroke-width="0.8"/>
<path d="M-5,-8 L-7,-16 L-9,-13 M-7,-16 L-5,-19" stroke="#ffd700" stroke-width="1.3" fill="none" stroke-linecap="round"/>
<path d="M5,-8 L7,-16 L9,-13 M7,-16 L5,-19" stroke="#ffd700" stroke-width="1.3" fill="none" stroke-linecap="round"/>
<ellipse cx="-4" cy="-2" rx="2.5" ry="2" fill="#fff" opacity="0.9"/>
<circle cx="-4" cy="-2" r="1.3" fill="#ffd700"/>
<circle cx="-4.3" cy="-2.2" r="0.6" fill="#1a0505"/>
<ellipse cx="4" cy="-2" rx="2.5" ry="2" fill="#fff" opacity="0.9"/>
<circle cx="4" cy="-2" r="1.3" fill="#ffd700"/>
<circle cx="3.7" cy="-2.2" r="0.6" fill="#1a0505"/>
<ellipse cx="0" cy="1" rx="3" ry="1.5" fill="#e74c3c" stroke="#ffd700" stroke-width="0.5"/>
<path d="M-6,4 Q0,10 6,4" fill="#8b1a12" stroke="#ffd700" stroke-width="0.6"/>
<line x1="-3" y1="4.5" x2="-2.5" y2="6.5" stroke="#fff" stroke-width="0.8" stroke-linecap="round"/>
<line x1="3" y1="4.5" x2="2.5" y2="6.5" stroke="#fff" stroke-width="0.8" stroke-linecap="round"/>
<path d="M-8,2 Q-14,5 -12,10" stroke="#ffd700" stroke-width="0.8" fill="none" opacity="0.7"/>
<path d="M8,2 Q14,5 12,10" stroke="#ffd700" stroke-width="0.8" fill="none" opacity="0.7"/>
<circle cx="-9" cy="-4" r="2.5" fill="#e8823a" opacity="0.6"/>
<circle cx="9" cy="-4" r="2.5" fill="#e8823a" opacity="0.6"/>"""


def plural(n, word):
    return f"{n} {word}" if n == 1 else f"{n} {word}s"


def render_floor(grid):
    parts = []
    for d in grid.days:
        cell = grid.cell_of(d.day)
        tile = floor_tile(*project(cell.week, cell.dow))
        parts.append(
            f'<polygon class="floor" points="{poly_to_str(tile)}" fill="#4d1c1c" stroke="#6b2a2a" stroke-width="0.4" opacity="0.65">'
            f"<title>{d.day.isoformat()}: {plural(d.count, 'contribution')}</title></polygon>"
        )
    return parts


def render_bars(grid, classifier):
    parts = []
    for cell in paint_order(grid.cells()):
        count = grid.count_at(cell.week, cell.dow)
        if count <= 0:
            continue  # floor tile is enough
        h = bar_height(count, grid.max_count)
        x, y = project(cell.week, cell.dow)
        shadow, lit, top = bar_faces(x, y, h)

        c = classifier.color(count)
        edge = highlight(c, 0.45)
        parts.append(f'<polygon class="bar-shadow" points="{poly_to_str(shadow)}" fill="{dim(c, 0.4)}" stroke="{dim(c, 0.25)}" stroke-width="0.3"/>')
        parts.append(f'<polygon class="bar-lit" points="{poly_to_str(lit)}" fill="{dim(c, 0.7)}" stroke="{dim(c, 0.5)}" stroke-width="0.3"/>')
        # metallic edge along the top of the lit face
        parts.append(
            f'<line x1="{fmt(lit[0][0])}" y1="{fmt(lit[0][1])}" x2="{fmt(lit[1][0])}" y2="{fmt(lit[1][1])}" '
            f'stroke="{edge}" stroke-width="0.8" opacity="0.5"/>'
        )
        parts.append(f'<polygon class="bar-top" points="{poly_to_str(top)}" fill="{highlight(c, 0.25)}" stroke="{edge}" stroke-width="0.5"/>')
        # shimmer across the top face
        tx, ty = top[0][0], (top[0][1] + top[1][1]) / 2
        half = (top[1][0] - top[3][0]) / 4
        delay = fmt((cell.week * 7 + cell.dow) * 0.08)
        parts.append(
            f'<line x1="{fmt(tx - half)}" y1="{fmt(ty)}" x2="{fmt(tx + half)}" y2="{fmt(ty)}" stroke="white" stroke-width="0.6">'
            f'<animate attributeName="opacity" values="0.08;0.25;0.08" dur="6s" begin="{delay}s" repeatCount="indefinite"/>'
            f"</line>"
        )
    return parts


def _follower(body, begin=None, opacity=None):
    begin_attr = f' begin="{begin}"' if begin else ""
    opacity_attr = f' opacity="{opacity}"' if opacity else ""
    return (
        f"<g{opacity_attr}>"
        f'<animateMotion dur="{ANIM_DUR}"{begin_attr} repeatCount="indefinite" rotate="auto">'
        f'<mpath href="#{PATH_ID}"/></animateMotion>\n'
        f"{body}</g>"
    )


def render_dragon(motion):
    parts = [f'<path id="{PATH_ID}" d="{motion.to_svg()}" fill="none" stroke="none"/>']

    parts.append(_follower(DRAGON_TAIL, begin=f"{fmt((SEGMENT_COUNT + 1) * SEGMENT_DELAY)}s", opacity="0.6"))

    for i in range(SEGMENT_COUNT):
        gold = i % 3 == 1
        fill = "#f5c842" if gold else "#c0392b"
        stroke = "#d4a020" if gold else "#ffd700"
        crest = "#e8823a" if gold else "#ffd700"
        # taper toward the tail
        t = i / SEGMENT_COUNT
        rx = 6 - t * 2.5
        ry = 4.5 - t * 1.5
        body = (
            f'<ellipse cx="0" cy="0" rx="{rx:.1f}" ry="{ry:.1f}" fill="{fill}" stroke="{stroke}" stroke-width="0.6"/>'
            f'<ellipse cx="0" cy="{-ry * 0.85:.1f}" rx="{rx * 0.35:.1f}" ry="{ry * 0.3:.1f}" fill="{crest}" opacity="0.45"/>'
        )
        parts.append(_follower(body, begin=f"{fmt((i + 1) * SEGMENT_DELAY)}s", opacity=fmt(0.88 - t * 0.3)))

    parts.append(_follower(DRAGON_HEAD, opacity="0.9"))
    return parts


def render_panel(summary, px=680, py=200):
    text = f'font-family="{FONT}"'
    parts = [
        f'<rect x="{px - 14}" y="{py - 28}" width="280" height="220" rx="10" fill="#3a1212" opacity="0.55" stroke="#f5c842" stroke-width="0.5" stroke-opacity="0.25"/>',
        f'<text x="{px}" y="{py}" {text} font-size="14" fill="#ffd700" font-weight="600">🔥 Streaks</text>',
        f'<text x="{px}" y="{py + 20}" {text} font-size="12" fill="#d4a574">Longest {plural(summary.best, "day")} ∙ Current {plural(summary.current, "day")}</text>',
        f'<line x1="{px}" y1="{py + 34}" x2="{px + 240}" y2="{py + 34}" stroke="#ffd700" stroke-width="0.5" opacity="0.2"/>',
        f'<text x="{px}" y="{py + 54}" {text} font-size="14" fill="#ffd700" font-weight="600">📊 Per day</text>',
        f'<text x="{px}" y="{py + 74}" {text} font-size="12" fill="#d4a574">Peak {summary.max} ∙ Average ~{summary.average:.2f}</text>',
        f'<line x1="{px}" y1="{py + 88}" x2="{px + 240}" y2="{py + 88}" stroke="#ffd700" stroke-width="0.5" opacity="0.2"/>',
        f'<text x="{px}" y="{py + 110}" {text} font-size="14" fill="#ffd700" font-weight="600">🏮 Total</text>',
        f'<text x="{px}" y="{py + 142}" font-family="{SERIF}" font-size="30" fill="#ffd700" font-weight="700" filter="url(#glow)">{summary.total}</text>',
        f'<text x="{px + 90}" y="{py + 142}" {text} font-size="12" fill="#d4a574">contributions</text>',
    ]
    parts.extend(render_legend(px, py + 172))
    return parts


def render_legend(lx, ly):
    small = f'font-family="{FONT}" font-size="10" fill="#d4a574" opacity="0.7"'
    parts = [f'<text x="{lx}" y="{ly}" {small}>Less</text>']
    for i, color in enumerate(PALETTE):
        parts.append(
            f'<rect class="legend" x="{lx + 28 + i * 16}" y="{ly - 9}" width="12" height="12" rx="2" '
            f'fill="{color}" stroke="#ffd700" stroke-width="0.3" stroke-opacity="0.3"/>'
        )
    parts.append(f'<text x="{lx + 28 + len(PALETTE) * 16 + 5}" y="{ly}" {small}>More</text>')
    return parts


def render(days, rng, username="", year=None, steps=STEPS, history=HISTORY):
    """Render the full SVG document for a contiguous day series.

    ``rng`` drives the dragon's walk; the same series, seed and ``year``
    give the same document.
    """
    grid = Grid(days)
    classifier = Classifier(d.count for d in grid.days)
    summary = summarize(grid.days)

    parts = []
    parts.append(f'<svg xmlns="http://www.w3.org/2000/svg" width="{WIDTH}" height="{HEIGHT}" viewBox="0 0 {WIDTH} {HEIGHT}">')
    if username:
        parts.append(f"<title>{escape(username)}: {plural(summary.total, 'contribution')}</title>")
    parts.append(DEFS)
    parts.append('<rect width="100%" height="100%" fill="url(#bgGrad)"/>')

    # frame
    parts.append(f'<rect class="border-glow" x="8" y="8" width="{WIDTH - 16}" height="{HEIGHT - 16}" rx="12" fill="none" stroke="#ffd700" stroke-width="1.5" opacity="0.2"/>')
    parts.append(f'<rect x="14" y="14" width="{WIDTH - 28}" height="{HEIGHT - 28}" rx="8" fill="none" stroke="#ffd700" stroke-width="0.5" opacity="0.12"/>')
    parts.append(ornaments.corner_sparkles(WIDTH, HEIGHT))

    parts.append(ornaments.cloud(60, 20, 0.45, 0.08, index=0))
    parts.append(ornaments.cloud(880, 18, 0.4, 0.06, index=1))
    parts.append(ornaments.cloud(420, 22, 0.3, 0.05, index=2))
    # same index so both lanterns sway in step
    parts.append(ornaments.lantern(40, 48, 0.75, index=0))
    parts.append(ornaments.lantern(910, 48, 0.75, index=0))
    parts.append(ornaments.firecracker(82, 30, 0.4))
    parts.append(ornaments.firecracker(868, 30, 0.4))

    parts.extend(render_floor(grid))
    parts.extend(render_bars(grid, classifier))

    waypoints = synthesize_path(grid, rng, steps=steps, history=history)
    motion = build_motion_path(waypoints)
    if motion is None:
        logger.info("dragon omitted: only %d waypoints", len(waypoints))
    else:
        parts.extend(render_dragon(motion))

    parts.extend(render_panel(summary))

    footer = "新春快乐 · 万事如意"
    if year is not None:
        footer += f" · {year}"
    parts.append(f'<text x="{WIDTH // 2}" y="{HEIGHT - 16}" font-family="{SERIF}" font-size="12" fill="#ffd700" text-anchor="middle" opacity="0.3">{footer}</text>')

    parts.append(ornaments.cloud(80, HEIGHT - 30, 0.4, 0.04, index=3))
    parts.append(ornaments.cloud(550, HEIGHT - 25, 0.5, 0.04, index=4))

    parts.append("</svg>")
    return "\n".join(parts)
