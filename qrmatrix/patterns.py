"""
Fixed function patterns and the anchors used to paste them.
"""

from enum import Enum
from typing import NamedTuple


class PatternSpec(NamedTuple):
    """
    A function pattern bitmap.

    Repeating patterns hold only their recurring unit and are tiled over a span.
    """
    matrix: tuple
    has_border: bool = False
    is_repeating: bool = False

    @property
    def height(self) -> int:
        return len(self.matrix)

    @property
    def width(self) -> int:
        return len(self.matrix[0])


class Pattern(Enum):
    FINDER = "finder"
    ALIGNMENT = "alignment"
    TIMING_ROW = "timing_row"
    TIMING_COL = "timing_col"


PATTERNS = {
    Pattern.FINDER: PatternSpec(
        (
            (1, 1, 1, 1, 1, 1, 1),
            (1, 0, 0, 0, 0, 0, 1),
            (1, 0, 1, 1, 1, 0, 1),
            (1, 0, 1, 1, 1, 0, 1),
            (1, 0, 1, 1, 1, 0, 1),
            (1, 0, 0, 0, 0, 0, 1),
            (1, 1, 1, 1, 1, 1, 1),
        ),
        has_border=True,
    ),
    Pattern.ALIGNMENT: PatternSpec(
        (
            (1, 1, 1, 1, 1),
            (1, 0, 0, 0, 1),
            (1, 0, 1, 0, 1),
            (1, 0, 0, 0, 1),
            (1, 1, 1, 1, 1),
        ),
    ),
    Pattern.TIMING_ROW: PatternSpec(((1, 0),), is_repeating=True),
    Pattern.TIMING_COL: PatternSpec(((1,), (0,)), is_repeating=True),
}


class Anchor(Enum):
    """Reference point of a pattern's bounding box."""
    NORTH = "north"
    NORTH_EAST = "north_east"
    SOUTH_WEST = "south_west"
    WEST = "west"
    NORTH_WEST = "north_west"
    CENTER = "center"


def anchor_offset(anchor: Anchor, height: int, width: int) -> tuple:
    """
    Distance from the top-left corner of a pattern to one of its anchors.

    Subtracting the offset from an anchored point gives the top-left corner
    to paste from.

    @param anchor: Reference point
    @param height: Pattern height in modules
    @param width: Pattern width in modules
    @return: (row_offset, col_offset)
    """
    if anchor is Anchor.NORTH:
        return 0, width // 2
    if anchor is Anchor.NORTH_EAST:
        return 0, width
    if anchor is Anchor.SOUTH_WEST:
        return height, 0
    if anchor is Anchor.WEST:
        return height // 2, 0
    if anchor is Anchor.NORTH_WEST:
        return 0, 0
    if anchor is Anchor.CENTER:
        return height // 2, width // 2
    raise ValueError(f"Unknown anchor: {anchor!r}")
