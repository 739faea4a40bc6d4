"""
Conversions between cable pair numbers and the 25-pair telephone color code.

Pair numbers are one-based. The minor color varies fastest, so pairs 1-5 share
the major color White, pairs 6-10 share Red, and so on up to pair 25
(Violet Slate).
"""

from __future__ import annotations

from collections.abc import Iterator

from core.enums.color import (
    ALL_MAJOR_COLORS,
    ALL_MINOR_COLORS,
    MAJOR_COLOR_MAP,
    MINOR_COLOR_MAP,
    NUMBER_OF_MINOR_COLORS,
    NUMBER_OF_PAIRS,
    MajorColor,
    MinorColor,
)
from core.errors import PairNumberOutOfRangeError, PairNumberTypeError, UnknownColorError
from core.models.color_pair import ColorPair

MANUAL_TITLE = "Color Code Reference Manual"
MANUAL_SEPARATOR = "-" * 28


def parse_major_color(major: MajorColor | str) -> MajorColor:
    """Resolve a MajorColor member or its display name (case-insensitive)."""
    if isinstance(major, MajorColor):
        return major
    for color in ALL_MAJOR_COLORS:
        if isinstance(major, str) and major.strip().lower() == color.value.lower():
            return color
    raise UnknownColorError(major, "major", [c.value for c in ALL_MAJOR_COLORS])


def parse_minor_color(minor: MinorColor | str) -> MinorColor:
    if isinstance(minor, MinorColor):
        return minor
    for color in ALL_MINOR_COLORS:
        if isinstance(minor, str) and minor.strip().lower() == color.value.lower():
            return color
    raise UnknownColorError(minor, "minor", [c.value for c in ALL_MINOR_COLORS])


def color_from_pair_number(pair_number: int) -> ColorPair:
    """Return the color pair for a one-based pair number in 1..25.

    Raises PairNumberTypeError for non-integers (bool included) and
    PairNumberOutOfRangeError for integers outside the code.
    """
    if isinstance(pair_number, bool) or not isinstance(pair_number, int):
        raise PairNumberTypeError(pair_number)
    if not 1 <= pair_number <= NUMBER_OF_PAIRS:
        raise PairNumberOutOfRangeError(pair_number, NUMBER_OF_PAIRS)

    zero_based = pair_number - 1
    major = ALL_MAJOR_COLORS[zero_based // NUMBER_OF_MINOR_COLORS]
    minor = ALL_MINOR_COLORS[zero_based % NUMBER_OF_MINOR_COLORS]
    return ColorPair(major=major, minor=minor)


def pair_number_from_color(major: MajorColor | str, minor: MinorColor | str) -> int:
    """Return the one-based pair number for a major/minor color combination.

    Colors may be given as enum members or display names ("black", "Orange").
    """
    major = parse_major_color(major)
    minor = parse_minor_color(minor)
    return MAJOR_COLOR_MAP[major] * NUMBER_OF_MINOR_COLORS + MINOR_COLOR_MAP[minor] + 1


def iter_color_code() -> Iterator[tuple[int, ColorPair]]:
    """Yield (pair_number, ColorPair) for every pair in ascending order."""
    for pair_number in range(1, NUMBER_OF_PAIRS + 1):
        yield pair_number, color_from_pair_number(pair_number)


def get_color_reference_manual() -> str:
    """Render the reference manual: a two-line header and one line per pair."""
    lines = [MANUAL_TITLE, MANUAL_SEPARATOR]
    lines.extend(f"{pair_number} : {color_pair}" for pair_number, color_pair in iter_color_code())
    return "\n".join(lines) + "\n"


def print_color_reference_manual() -> None:
    print(get_color_reference_manual(), end="")
