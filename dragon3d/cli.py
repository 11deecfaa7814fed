# cli.py
# Usage: dragon3d <github-username> [--output PATH] [--duration half-year|full-year]

import argparse
import logging
import random
import sys
from datetime import date
from pathlib import Path

from dragon3d.days import LOOKBACK, build_days, contribution_window
from dragon3d.errors import ConfigurationError, Dragon3DError
from dragon3d.fetch import fetch_contributions
from dragon3d.scene import render

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT = "assets/dragon3d.svg"


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Render a GitHub contribution calendar as an animated isometric SVG."
    )
    parser.add_argument("username", nargs="?", help="GitHub username.")
    parser.add_argument("--username", dest="username_opt", help="GitHub username.")
    parser.add_argument(
        "--output",
        default=DEFAULT_OUTPUT,
        help=f"Where to write the SVG (default: {DEFAULT_OUTPUT}).",
    )
    parser.add_argument(
        "--duration",
        choices=sorted(LOOKBACK),
        default="full-year",
        help="How far back to look (default: full-year).",
    )
    parser.add_argument("--seed", type=int, help="Seed for the dragon's path.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging.")
    ns = parser.parse_args(argv)

    ns.username = (ns.username_opt or ns.username or "").strip()
    if not ns.username:
        raise ConfigurationError("Missing --username")
    return ns


def generate(username, output, duration="full-year", seed=None, today=None):
    end = today or date.today()
    start, end = contribution_window(end, duration)
    logger.debug("window %s .. %s (%s)", start, end, duration)

    counts = fetch_contributions(username, start, end)
    days = build_days(counts, start, end)

    svg = render(days, random.Random(seed), username=username, year=end.year)
    out = Path(output).expanduser().resolve()
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(svg, encoding="utf-8")
    return out, days


def main(argv=None):
    try:
        ns = parse_args(argv)
        logging.basicConfig(
            level=logging.DEBUG if ns.verbose else logging.WARNING,
            format="%(levelname)s %(name)s: %(message)s",
        )
        out, days = generate(ns.username, ns.output, ns.duration, ns.seed)
    except Dragon3DError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    print(f"Wrote {out} (days={len(days)})")
    return 0
