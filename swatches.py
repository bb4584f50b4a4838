from collections import namedtuple

from color_logic import hsl_to_css, hsl_to_rgb, rgb_to_css, rgb_to_hex
from palette_logic import BASE_SWATCH_INDEX, palette_entries

# Text colors drawn on top of a swatch
TEXT_ON_LIGHT = "#111111"
TEXT_ON_DARK = "#ffffff"

# Swatches lighter than this get dark text
LIGHT_BACKGROUND_THRESHOLD = 0.6

Swatch = namedtuple(
    "Swatch",
    ["index", "row", "column", "hsl", "hex", "rgb", "rgb_css", "hsl_css", "text_color", "is_base"],
)


def to_rgb_triple(hsl):
    return hsl_to_rgb(*hsl)


def to_hex(hsl):
    return rgb_to_hex(*to_rgb_triple(hsl))


def to_css_string(hsl):
    return hsl_to_css(*hsl)


def contrast_text_color(hsl):
    """
    Dark text on light swatches (l > 0.6), light text otherwise.
    """
    if hsl[2] > LIGHT_BACKGROUND_THRESHOLD:
        return TEXT_ON_LIGHT
    return TEXT_ON_DARK


def describe_swatch(entry, index):
    """
    Everything a widget needs to draw one palette entry.
    """
    rgb = to_rgb_triple(entry.hsl)
    return Swatch(
        index=index,
        row=entry.row,
        column=entry.column,
        hsl=entry.hsl,
        hex=rgb_to_hex(*rgb),
        rgb=rgb,
        rgb_css=rgb_to_css(*rgb),
        hsl_css=to_css_string(entry.hsl),
        text_color=contrast_text_color(entry.hsl),
        is_base=index == BASE_SWATCH_INDEX,
    )


def describe_palette(palette):
    return [describe_swatch(entry, i) for i, entry in enumerate(palette_entries(palette))]
