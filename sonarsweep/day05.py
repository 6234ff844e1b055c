"""Hydrothermal venture: find points where vent lines overlap."""

from __future__ import annotations

import argparse
import re
import sys
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_LINE = re.compile(r"([0-9]+),([0-9]+) -> ([0-9]+),([0-9]+)\Z")

Point = tuple[int, int]


def _span(start: int, end: int) -> range:
    """Coordinates from start to end inclusive, in the direction of travel."""
    step = 1 if end > start else -1
    return range(start, end + step, step)


@dataclass(frozen=True)
class Line:
    """A vent line between two end points."""

    start_x: int
    start_y: int
    end_x: int
    end_y: int

    def is_straight(self) -> bool:
        """Whether the line is horizontal or vertical."""
        return self.start_x == self.end_x or self.start_y == self.end_y

    def cells(self) -> list[Point]:
        """Every point covered by the line, from start to end."""
        if self.start_x == self.end_x:
            return [(self.start_x, y) for y in _span(self.start_y, self.end_y)]
        if self.start_y == self.end_y:
            return [(x, self.start_y) for x in _span(self.start_x, self.end_x)]
        step_y = _span(self.start_y, self.end_y).step
        return [
            (x, self.start_y + step_y * offset)
            for offset, x in enumerate(_span(self.start_x, self.end_x))
        ]


def parse_line(text: str) -> Line:
    """Parse a line written as 'x1,y1 -> x2,y2'."""
    match = _LINE.search(text)
    if match is None:
        raise ValueError(f"invalid vent line: {text!r}")
    return Line(*(int(group) for group in match.groups()))


def count_overlaps(lines: Iterable[Line]) -> int:
    """Count the points covered by at least two of the lines."""
    coverage = Counter(point for line in lines for point in set(line.cells()))
    return sum(1 for count in coverage.values() if count >= 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Read vent lines from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Count overlapping vent points read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        lines = [parse_line(row.removesuffix("\r")) for row in rows]
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(count_overlaps(line for line in lines if line.is_straight()))
    print(count_overlaps(lines))
    return 0