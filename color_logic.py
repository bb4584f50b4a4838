import math
import re
from collections import namedtuple

RGB = namedtuple("RGB", ["r", "g", "b"])
HSL = namedtuple("HSL", ["h", "s", "l"])

HEX_REGEX = re.compile(r"[0-9a-fA-F]{6}")


class MalformedHexError(ValueError):
    """
    Raised when a hex color string is too short or holds non-hex digits.
    """


def _round(value):
    # Half up, like the browser's Math.round (Python's round() is banker's).
    return int(math.floor(value + 0.5))


def hex_to_rgb(hex_str):
    """
    Convert '#rrggbb' (the '#' is optional) to RGB (0-255).
    Only the first six digits are read; anything after them is ignored.
    """
    if not isinstance(hex_str, str):
        raise MalformedHexError(f"Expected a hex string, got {type(hex_str).__name__}")

    value = hex_str[1:] if hex_str.startswith("#") else hex_str
    if len(value) < 6:
        raise MalformedHexError(f"Hex color too short: {hex_str!r}")

    digits = value[:6]
    # int(x, 16) would accept '+f', ' f' and '0x', so check the slice first
    if not HEX_REGEX.fullmatch(digits):
        raise MalformedHexError(f"Non-hex characters in color: {hex_str!r}")

    return RGB(int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16))


def rgb_to_hsl(r, g, b):
    """
    Convert RGB (0-255) to HSL (0-1).
    When two channels tie for the max, red wins over green and green over blue.
    """
    r, g, b = r / 255.0, g / 255.0, b / 255.0
    max_c = max(r, g, b)
    min_c = min(r, g, b)
    l = (max_c + min_c) / 2

    if max_c == min_c:
        return HSL(0.0, 0.0, l)

    d = max_c - min_c
    s = d / (2 - max_c - min_c) if l > 0.5 else d / (max_c + min_c)

    if max_c == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif max_c == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4

    return HSL(h / 6, s, l)


def hue_to_rgb(p, q, t):
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_rgb(h, s, l):
    """
    Convert HSL (0-1) to RGB (0-255), rounding each channel.
    """
    if s == 0:
        v = _round(l * 255)
        return RGB(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    r = hue_to_rgb(p, q, h + 1 / 3)
    g = hue_to_rgb(p, q, h)
    b = hue_to_rgb(p, q, h - 1 / 3)
    return RGB(_round(r * 255), _round(g * 255), _round(b * 255))


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def rgb_to_css(r, g, b):
    return f"rgb({r}, {g}, {b})"


def hsl_to_css(h, s, l):
    return f"hsl({_round(h * 360)}, {_round(s * 100)}%, {_round(l * 100)}%)"


def hsl_to_hex(h, s, l):
    """
    Direct HSL -> hex without the p/q helper.
    Agrees with rgb_to_hex(*hsl_to_rgb(h, s, l)) within one step per channel.
    """
    a = s * min(l, 1 - l)

    def channel(n):
        k = (n + h * 12) % 12
        v = l - a * max(-1, min(k - 3, 9 - k, 1))
        return _round(v * 255)

    return rgb_to_hex(channel(0), channel(8), channel(4))


def normalize_hex(hex_str):
    """
    Canonical lowercase '#rrggbb' form of any string hex_to_rgb accepts.
    """
    return rgb_to_hex(*hex_to_rgb(hex_str))
