# ornaments.py
# Fixed-shape Spring Festival decorations. Each takes an explicit ``index``
# where two otherwise identical instances need related but distinct timings.

from dragon3d.iso import fmt

GOLD = "#ffd700"


def lantern(cx, cy, scale=1.0, index=0):
    s = scale
    dur = f"{fmt(6 + index * 1.5)}s"
    sway = fmt(3 * s)

    def p(v):
        return fmt(v * s)

    parts = []
    parts.append("<g>")
    parts.append(
        f'<animateTransform attributeName="transform" type="translate" '
        f'values="0,0;{sway},0;0,0;-{sway},0;0,0" dur="{dur}" repeatCount="indefinite"/>'
    )
    # string and top cap
    parts.append(f'<line x1="{fmt(cx)}" y1="{fmt(cy - 28 * s)}" x2="{fmt(cx)}" y2="{fmt(cy - 18 * s)}" stroke="{GOLD}" stroke-width="{p(1.5)}"/>')
    parts.append(f'<rect x="{fmt(cx - 6 * s)}" y="{fmt(cy - 18 * s)}" width="{p(12)}" height="{p(4)}" rx="{p(1.5)}" fill="{GOLD}"/>')
    # body
    parts.append(
        f'<ellipse cx="{fmt(cx)}" cy="{fmt(cy)}" rx="{p(14)}" ry="{p(18)}" fill="#e74c3c">'
        f'<animate attributeName="opacity" values="0.85;0.95;0.85" dur="4s" repeatCount="indefinite"/>'
        f"</ellipse>"
    )
    parts.append(f'<ellipse cx="{fmt(cx)}" cy="{fmt(cy)}" rx="{p(14)}" ry="{p(18)}" fill="none" stroke="{GOLD}" stroke-width="{p(0.8)}"/>')
    # ribs
    parts.append(f'<line x1="{fmt(cx)}" y1="{fmt(cy - 18 * s)}" x2="{fmt(cx)}" y2="{fmt(cy + 18 * s)}" stroke="{GOLD}" stroke-width="{p(0.5)}" opacity="0.5"/>')
    for side in (-1, 1):
        rx = cx + side * 7 * s
        parts.append(f'<line x1="{fmt(rx)}" y1="{fmt(cy - 16 * s)}" x2="{fmt(rx)}" y2="{fmt(cy + 16 * s)}" stroke="{GOLD}" stroke-width="{p(0.4)}" opacity="0.3"/>')
    parts.append(f'<rect x="{fmt(cx - 14 * s)}" y="{fmt(cy - 3 * s)}" width="{p(28)}" height="{p(6)}" rx="{p(2)}" fill="{GOLD}" opacity="0.35"/>')
    parts.append(f'<text x="{fmt(cx)}" y="{fmt(cy + 4 * s)}" font-family="serif" font-size="{p(11)}" fill="{GOLD}" text-anchor="middle" font-weight="700">福</text>')
    # bottom cap and tassel
    parts.append(f'<rect x="{fmt(cx - 6 * s)}" y="{fmt(cy + 14 * s)}" width="{p(12)}" height="{p(4)}" rx="{p(1.5)}" fill="{GOLD}"/>')
    parts.append(f'<line x1="{fmt(cx)}" y1="{fmt(cy + 18 * s)}" x2="{fmt(cx)}" y2="{fmt(cy + 30 * s)}" stroke="{GOLD}" stroke-width="{p(1.2)}"/>')
    for side in (-1, 1):
        parts.append(f'<line x1="{fmt(cx + side * 3 * s)}" y1="{fmt(cy + 30 * s)}" x2="{fmt(cx)}" y2="{fmt(cy + 26 * s)}" stroke="{GOLD}" stroke-width="{p(0.8)}"/>')
    # glow
    parts.append(
        f'<ellipse cx="{fmt(cx)}" cy="{fmt(cy)}" rx="{p(18)}" ry="{p(22)}" fill="url(#lanternGlow)">'
        f'<animate attributeName="opacity" values="0.2;0.35;0.2" dur="{dur}" repeatCount="indefinite"/>'
        f"</ellipse>"
    )
    parts.append("</g>")
    return "\n".join(parts)


def cloud(cx, cy, scale=1.0, opacity=0.12, index=0):
    drift = 12 + index * 4
    dur = f"{40 + index * 12}s"
    puffs = [(0, 0, 12), (10, -3, 10), (20, 0, 8), (-10, -2, 9), (5, -10, 7)]
    circles = "".join(f'<circle cx="{x}" cy="{y}" r="{r}" fill="{GOLD}"/>' for x, y, r in puffs)
    return (
        f'<g opacity="{fmt(opacity)}">'
        f'<animateTransform attributeName="transform" type="translate" '
        f'values="{fmt(cx)},{fmt(cy)};{fmt(cx + drift)},{fmt(cy - 2)};{fmt(cx)},{fmt(cy)}" '
        f'dur="{dur}" repeatCount="indefinite"/>'
        f'<g transform="scale({fmt(scale)})">{circles}</g>'
        f"</g>"
    )


def firecracker(x, y, scale=1.0):
    s = scale
    parts = [f'<line x1="{fmt(x)}" y1="{fmt(y)}" x2="{fmt(x)}" y2="{fmt(y + 70 * s)}" stroke="{GOLD}" stroke-width="{fmt(s)}" opacity="0.6"/>']
    for i in range(5):
        fy = y + 10 * s + i * 14 * s
        fx = x + (-4 * s if i % 2 == 0 else 4 * s)
        parts.append(f'<rect x="{fmt(fx - 4 * s)}" y="{fmt(fy)}" width="{fmt(8 * s)}" height="{fmt(12 * s)}" rx="{fmt(2 * s)}" fill="#e74c3c" stroke="{GOLD}" stroke-width="{fmt(0.5 * s)}"/>')
        parts.append(f'<line x1="{fmt(fx)}" y1="{fmt(fy)}" x2="{fmt(fx)}" y2="{fmt(fy - 4 * s)}" stroke="{GOLD}" stroke-width="{fmt(0.5 * s)}"/>')
        # sparkle at the fuse tip
        delay = f"{fmt(i * 0.8)}s"
        parts.append(
            f'<circle cx="{fmt(fx)}" cy="{fmt(fy - 5 * s)}" r="{fmt(2 * s)}" fill="{GOLD}">'
            f'<animate attributeName="opacity" values="0;1;0" dur="2.5s" begin="{delay}" repeatCount="indefinite"/>'
            f'<animate attributeName="r" values="{fmt(s)};{fmt(2.5 * s)};{fmt(s)}" dur="2.5s" begin="{delay}" repeatCount="indefinite"/>'
            f"</circle>"
        )
    return "\n".join(parts)


def corner_sparkles(width, height, inset=24):
    corners = [(inset, inset), (width - inset, inset), (inset, height - inset), (width - inset, height - inset)]
    parts = []
    for i, (ox, oy) in enumerate(corners):
        points = f"{ox},{oy - 6} {ox + 6},{oy} {ox},{oy + 6} {ox - 6},{oy}"
        parts.append(f'<polygon class="corner-sparkle" points="{points}" fill="{GOLD}" style="animation-delay: {fmt(i * 0.5)}s;"/>')
    return "\n".join(parts)
