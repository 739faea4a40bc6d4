"""Pydantic models for core color code domain objects."""

from .color_pair import ColorPair

__all__ = [
    "ColorPair",
]
