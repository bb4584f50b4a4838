from collections import namedtuple

from loguru import logger

from color_logic import HSL, hex_to_rgb, rgb_to_hsl

BASE_HUE_SHIFT = 0.05

# Row order: warm (+shift), neutral, cool (-shift)
HUE_DIRECTIONS = (1, 0, -1)
# Column order, lightest first
LIGHTNESS_STEPS = (0.2, 0.1, 0.0, -0.1, -0.2)

GRID_ROWS = len(HUE_DIRECTIONS)
GRID_COLUMNS = len(LIGHTNESS_STEPS)
PALETTE_SIZE = GRID_ROWS * GRID_COLUMNS

# Neutral row, unchanged lightness. Widgets rely on this position.
BASE_SWATCH_ROW = 1
BASE_SWATCH_COLUMN = 2
BASE_SWATCH_INDEX = BASE_SWATCH_ROW * GRID_COLUMNS + BASE_SWATCH_COLUMN

PaletteEntry = namedtuple("PaletteEntry", ["hsl", "row", "column"])


def hue_shift_for(intensity):
    """
    Total hue offset between neighbouring rows for a given intensity.
    """
    return BASE_HUE_SHIFT + intensity


def intensity_from_percent(pct):
    """
    Map the 0-100 warmth slider onto an intensity in [-0.1, 0.1].
    50 is neutral.
    """
    pct = max(0, min(100, pct))
    return (pct - 50) / 500


def _shift_lightness(l, delta):
    # Each side only clamps the bound it can cross.
    if delta > 0:
        return min(1.0, l + delta)
    if delta < 0:
        return max(0.0, l + delta)
    return l


def generate_palette(base, intensity=0.0):
    """
    Build the 15 color palette for an HSL base color.

    Three rows of five: hue shifted towards +shift, unshifted, and towards
    -shift, each stepping lightness by +0.2, +0.1, 0, -0.1, -0.2. Saturation
    is copied from the base. Index BASE_SWATCH_INDEX is the base itself.
    """
    h, s, l = base
    shift = hue_shift_for(intensity)

    palette = []
    for direction in HUE_DIRECTIONS:
        row_hue = h + direction * shift
        for delta in LIGHTNESS_STEPS:
            palette.append(HSL(row_hue, s, _shift_lightness(l, delta)))

    # Wrap hue back into [0, 1)
    return [HSL((c.h + 1) % 1, c.s, c.l) for c in palette]


def palette_entries(palette):
    """
    Attach (row, column) grid positions to a generated palette.
    """
    if len(palette) != PALETTE_SIZE:
        raise ValueError(f"Expected {PALETTE_SIZE} colors, got {len(palette)}")

    return [
        PaletteEntry(HSL(*color), i // GRID_COLUMNS, i % GRID_COLUMNS)
        for i, color in enumerate(palette)
    ]


def palette_from_hex(hex_str, intensity=0.0):
    """
    hex -> RGB -> HSL -> palette. Raises MalformedHexError on bad input.
    """
    base = rgb_to_hsl(*hex_to_rgb(hex_str))
    logger.debug(f"Generating palette for {hex_str} base={base} intensity={intensity:.3f}")
    return generate_palette(base, intensity)
