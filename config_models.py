"""
Pydantic models for validating lookup requests given on the command line.

The CLI parses raw strings with argparse and hands them to these models so
that range and color-name errors are reported the same way everywhere.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, field_validator

from coders.color_coder import color_from_pair_number, pair_number_from_color, parse_major_color, parse_minor_color
from core.enums.color import NUMBER_OF_PAIRS, MajorColor, MinorColor
from core.models.color_pair import ColorPair


class PairLookupRequest(BaseModel):
    """Look up the color pair for a pair number."""

    pair_number: int = Field(..., ge=1, le=NUMBER_OF_PAIRS, description="One-based pair number")

    model_config = {
        "frozen": True,
        "strict": True,
    }

    def resolve(self) -> ColorPair:
        return color_from_pair_number(self.pair_number)


class ColorLookupRequest(BaseModel):
    """Look up the pair number for a major/minor color combination."""

    major: MajorColor = Field(..., description="Major color name, e.g. 'Black'")
    minor: MinorColor = Field(..., description="Minor color name, e.g. 'Orange'")

    model_config = {
        "frozen": True,
    }

    @field_validator("major", mode="before")
    @classmethod
    def _parse_major(cls, value):
        return parse_major_color(value)

    @field_validator("minor", mode="before")
    @classmethod
    def _parse_minor(cls, value):
        return parse_minor_color(value)

    def resolve(self) -> int:
        return pair_number_from_color(self.major, self.minor)
