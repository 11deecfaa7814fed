# dragon3d
# Isometric 3D contribution graph with a dragon gliding across the bars.

__version__ = "0.1.0"
