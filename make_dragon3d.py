# make_dragon3d.py
# Generates an isometric 3D contribution graph SVG with a dragon gliding over it.
# Usage: python make_dragon3d.py <github-username> [--output PATH] [--duration half-year|full-year]

from dragon3d.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
