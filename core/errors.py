"""Exceptions raised by the color code lookups."""

from __future__ import annotations


class ColorCodeError(Exception):
    """Base class for all color code errors."""


class PairNumberTypeError(ColorCodeError, TypeError):
    """Raised when a pair number is not an integer."""

    def __init__(self, value: object):
        self.value = value
        super().__init__(f"Pair number must be an int, got {type(value).__name__}: {value!r}")


class PairNumberOutOfRangeError(ColorCodeError, ValueError):
    """Raised when a pair number falls outside 1..max_pair_number."""

    def __init__(self, value: int, max_pair_number: int):
        self.value = value
        self.max_pair_number = max_pair_number
        super().__init__(f"Pair number {value} is out of range (expected 1-{max_pair_number})")


class UnknownColorError(ColorCodeError, ValueError):
    """Raised when a color name does not match any known major or minor color."""

    def __init__(self, name: object, kind: str, choices: list[str]):
        self.name = name
        self.kind = kind
        msg = f"Unknown {kind} color {name!r} (expected one of: {', '.join(choices)})"
        super().__init__(msg)


class SelfTestFailure(ColorCodeError, AssertionError):
    """Raised when the startup self-test finds a wrong mapping."""
