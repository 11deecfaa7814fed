# colors.py
# Brightness transforms used to shade bar faces.


def _channels(hex_color):
    n = int(hex_color.lstrip("#"), 16)
    return (n >> 16) & 255, (n >> 8) & 255, n & 255


def _to_hex(rgb):
    return "#" + "".join(f"{v:02x}" for v in rgb)


def dim(hex_color, slope):
    """Scale every channel by ``slope`` (clamped to 0..255)."""
    return _to_hex(max(0, min(255, round(ch * slope))) for ch in _channels(hex_color))


def highlight(hex_color, amount):
    """Blend toward white by ``amount`` (0 keeps the colour, 1 gives white)."""
    return _to_hex(min(255, round(ch + (255 - ch) * amount)) for ch in _channels(hex_color))
