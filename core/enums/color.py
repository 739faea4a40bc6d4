from __future__ import annotations

from enum import Enum


class MajorColor(str, Enum):
    """The five major (tip) colors of the 25-pair telephone color code.

    Values are the display names printed in the reference manual.
    """

    WHITE = "White"
    RED = "Red"
    BLACK = "Black"
    YELLOW = "Yellow"
    VIOLET = "Violet"


class MinorColor(str, Enum):
    """The five minor (ring) colors of the 25-pair telephone color code."""

    BLUE = "Blue"
    ORANGE = "Orange"
    GREEN = "Green"
    BROWN = "Brown"
    SLATE = "Slate"


ALL_MAJOR_COLORS: tuple[MajorColor, ...] = (
    MajorColor.WHITE,
    MajorColor.RED,
    MajorColor.BLACK,
    MajorColor.YELLOW,
    MajorColor.VIOLET,
)

ALL_MINOR_COLORS: tuple[MinorColor, ...] = (
    MinorColor.BLUE,
    MinorColor.ORANGE,
    MinorColor.GREEN,
    MinorColor.BROWN,
    MinorColor.SLATE,
)

MAJOR_COLOR_MAP: dict[MajorColor, int] = {color: i for i, color in enumerate(ALL_MAJOR_COLORS)}
MINOR_COLOR_MAP: dict[MinorColor, int] = {color: i for i, color in enumerate(ALL_MINOR_COLORS)}

NUMBER_OF_MAJOR_COLORS = len(ALL_MAJOR_COLORS)
NUMBER_OF_MINOR_COLORS = len(ALL_MINOR_COLORS)
NUMBER_OF_PAIRS = NUMBER_OF_MAJOR_COLORS * NUMBER_OF_MINOR_COLORS
