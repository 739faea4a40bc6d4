"""Startup self-test that checks known color code mappings before printing the manual."""

from __future__ import annotations

from coders.color_coder import (
    MANUAL_SEPARATOR,
    MANUAL_TITLE,
    color_from_pair_number,
    get_color_reference_manual,
    pair_number_from_color,
)
from core.enums.color import NUMBER_OF_PAIRS, MajorColor, MinorColor
from core.errors import SelfTestFailure

NUMBER_TO_PAIR_CASES: tuple[tuple[int, MajorColor, MinorColor], ...] = (
    (4, MajorColor.WHITE, MinorColor.BROWN),
    (5, MajorColor.WHITE, MinorColor.SLATE),
)

PAIR_TO_NUMBER_CASES: tuple[tuple[MajorColor, MinorColor, int], ...] = (
    (MajorColor.BLACK, MinorColor.ORANGE, 12),
    (MajorColor.VIOLET, MinorColor.SLATE, 25),
)


def _check(condition: bool, msg: str) -> None:
    if not condition:
        raise SelfTestFailure(msg)


def check_number_to_pair(pair_number: int, expected_major: MajorColor, expected_minor: MinorColor, verbose=True):
    color_pair = color_from_pair_number(pair_number)
    if verbose:
        print(f"Got pair {color_pair}")
    _check(color_pair.major == expected_major, f"Pair {pair_number}: expected major {expected_major.value}")
    _check(color_pair.minor == expected_minor, f"Pair {pair_number}: expected minor {expected_minor.value}")


def check_pair_to_number(major: MajorColor, minor: MinorColor, expected_pair_number: int, verbose=True):
    pair_number = pair_number_from_color(major, minor)
    if verbose:
        print(f"Got pair number {pair_number}")
    _check(
        pair_number == expected_pair_number,
        f"{major.value} {minor.value}: expected pair number {expected_pair_number}, got {pair_number}",
    )


def check_reference_manual(manual: str | None = None) -> None:
    """Verify header, entry count and that every pair has its own line."""
    if manual is None:
        manual = get_color_reference_manual()
    lines = manual.splitlines()

    _check(lines[:2] == [MANUAL_TITLE, MANUAL_SEPARATOR], "Manual header is missing or malformed")

    entries = lines[2:]
    _check(
        len(entries) == NUMBER_OF_PAIRS,
        f"Manual has {len(entries)} entries, expected {NUMBER_OF_PAIRS}",
    )
    _check("1 : White Blue" in entries, "Manual is missing the first pair")
    _check("25 : Violet Slate" in entries, "Manual is missing the last pair")

    for pair_number in range(1, NUMBER_OF_PAIRS + 1):
        entry = f"{pair_number} : {color_from_pair_number(pair_number)}"
        _check(entries.count(entry) == 1, f"Manual entry {entry!r} missing or duplicated")


def run_self_test(verbose: bool = True) -> None:
    """Run the fixed verification sequence. Raises SelfTestFailure on the first mismatch."""
    for pair_number, major, minor in NUMBER_TO_PAIR_CASES:
        check_number_to_pair(pair_number, major, minor, verbose=verbose)

    for major, minor, pair_number in PAIR_TO_NUMBER_CASES:
        check_pair_to_number(major, minor, pair_number, verbose=verbose)

    check_reference_manual()
