"""Core enums for telephone color code domain objects."""

from .color import (
    ALL_MAJOR_COLORS,
    ALL_MINOR_COLORS,
    MAJOR_COLOR_MAP,
    MINOR_COLOR_MAP,
    NUMBER_OF_MAJOR_COLORS,
    NUMBER_OF_MINOR_COLORS,
    NUMBER_OF_PAIRS,
    MajorColor,
    MinorColor,
)

__all__ = [
    "MajorColor",
    "MinorColor",
    "ALL_MAJOR_COLORS",
    "ALL_MINOR_COLORS",
    "MAJOR_COLOR_MAP",
    "MINOR_COLOR_MAP",
    "NUMBER_OF_MAJOR_COLORS",
    "NUMBER_OF_MINOR_COLORS",
    "NUMBER_OF_PAIRS",
]
