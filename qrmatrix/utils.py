"""
Colour helpers for rendering QR codes.

Accepts hex strings, a few colour names and ANSI colour codes.
"""

import re

# 8-colour ANSI palette in code order (30-37 / 40-47), then its bright variant (90-97 / 100-107)
PALETTE_NAMES = ("black", "red", "green", "yellow", "blue", "magenta", "cyan", "white")
NORMAL_PALETTE = (
    (0, 0, 0), (128, 0, 0), (0, 128, 0), (128, 128, 0),
    (0, 0, 128), (128, 0, 128), (0, 128, 128), (192, 192, 192),
)
BRIGHT_PALETTE = (
    (128, 128, 128), (255, 0, 0), (0, 255, 0), (255, 255, 0),
    (0, 0, 255), (255, 0, 255), (0, 255, 255), (255, 255, 255),
)

FOREGROUND_BASE = {30: NORMAL_PALETTE, 90: BRIGHT_PALETTE}
BACKGROUND_OFFSET = 10

ANSI_RGB_MAP = {
    base + offset + i: rgb
    for base, palette in FOREGROUND_BASE.items()
    for offset in (0, BACKGROUND_OFFSET)
    for i, rgb in enumerate(palette)
}

# Names resolve to the bright palette, except black, with grey as bright black
NAMED_COLOURS = dict(zip(PALETTE_NAMES, BRIGHT_PALETTE))
NAMED_COLOURS["black"] = NORMAL_PALETTE[0]
NAMED_COLOURS["gray"] = NAMED_COLOURS["grey"] = BRIGHT_PALETTE[0]

HEX_COLOUR = re.compile(r"^#([0-9a-fA-F]{6})$")
ANSI_CODE = re.compile(r"^(?:\x1b\[|\[)?(\d+)m?$")


def parse_colour(value, default=None):
    """
    Convert a colour description to an RGB tuple.

    @param value: RGB tuple, "#rrggbb", colour name, or ANSI code such as 31, "[31m" or "\\033[31m"
    @param default: Returned when the value is empty or not understood
    @return: Tuple of (R, G, B)
    """
    if value is None or value == "":
        return default
    if isinstance(value, tuple) and len(value) == 3:
        return value
    if isinstance(value, int):
        return ANSI_RGB_MAP.get(value, default)

    text = str(value).strip()
    match = HEX_COLOUR.match(text)
    if match:
        digits = match.group(1)
        return tuple(int(digits[i:i + 2], 16) for i in (0, 2, 4))
    if text.lower() in NAMED_COLOURS:
        return NAMED_COLOURS[text.lower()]
    match = ANSI_CODE.match(text)
    if match:
        return ANSI_RGB_MAP.get(int(match.group(1)), default)
    return default
