"""Lanternfish: simulate a growing school of fish."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")
_RESET_TIMER = 6
_NEW_TIMER = 8


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def simulate_school(fishes: Iterable[int], days: int) -> list[int]:
    """Return every fish's timer after the given number of days.

    Newborn fish are appended to the end of the school each day.
    """
    school = list(fishes)
    for _ in range(days):
        newborn = sum(1 for timer in school if timer == 0)
        school = [timer - 1 if timer else _RESET_TIMER for timer in school]
        school.extend([_NEW_TIMER] * newborn)
    return school


def count_fish(fishes: Iterable[int], days: int) -> int:
    """Return how many fish there are after the given number of days."""
    counts = [0] * (_NEW_TIMER + 1)
    for timer in fishes:
        if not 0 <= timer <= _NEW_TIMER:
            raise ValueError(f"fish timer out of range: {timer}")
        counts[timer] += 1
    for _ in range(days):
        spawning = counts[0]
        counts = counts[1:] + [spawning]
        counts[_RESET_TIMER] += spawning
    return sum(counts)


def main(argv: Sequence[str] | None = None) -> int:
    """Read fish timers from standard input and print the count after 256 days."""
    parser = argparse.ArgumentParser(
        description="Count lanternfish from timers read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        fishes = [
            _parse_int(value)
            for row in rows
            for value in row.removesuffix("\r").split(",")
        ]
        total = count_fish(fishes, 256)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(total)
    return 0