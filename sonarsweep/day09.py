"""Smoke basin: find low points and basins in a heightmap."""

from __future__ import annotations

import argparse
import math
import sys
from collections.abc import Iterable, Iterator, Sequence

_DIGITS = "0123456789"
_BASIN_WALL = 9

Grid = list[list[int]]
Point = tuple[int, int]


def parse_grid(lines: Iterable[str]) -> Grid:
    """Parse rows of single-digit numbers into a grid."""
    grid: Grid = []
    for line in lines:
        row = []
        for character in line:
            if character not in _DIGITS:
                raise ValueError(f"invalid digit: {character!r}")
            row.append(int(character))
        grid.append(row)
    return grid


def _neighbours(heightmap: Sequence[Sequence[int]], row: int, column: int) -> Iterator[Point]:
    for r, c in ((row, column - 1), (row, column + 1), (row - 1, column), (row + 1, column)):
        if 0 <= r < len(heightmap) and 0 <= c < len(heightmap[r]):
            yield r, c


def low_points(heightmap: Sequence[Sequence[int]]) -> list[Point]:
    """Return (row, column) of every point lower than all its neighbours."""
    return [
        (row, column)
        for row, line in enumerate(heightmap)
        for column, value in enumerate(line)
        if all(value < heightmap[r][c] for r, c in _neighbours(heightmap, row, column))
    ]


def risk_sum(heightmap: Sequence[Sequence[int]]) -> int:
    """Sum of one plus the height of every low point."""
    return sum(heightmap[row][column] + 1 for row, column in low_points(heightmap))


def _basin(heightmap: Sequence[Sequence[int]], start: Point) -> set[Point]:
    seen = {start}
    pending = [start]
    while pending:
        row, column = pending.pop()
        height = heightmap[row][column]
        for r, c in _neighbours(heightmap, row, column):
            value = heightmap[r][c]
            if (r, c) not in seen and value > height and value != _BASIN_WALL:
                seen.add((r, c))
                pending.append((r, c))
    return seen


def basin_sizes(heightmap: Sequence[Sequence[int]]) -> list[int]:
    """Sizes of the basins around each low point, in ascending order."""
    return sorted(len(_basin(heightmap, point)) for point in low_points(heightmap))


def main(argv: Sequence[str] | None = None) -> int:
    """Read a heightmap from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Analyse a heightmap read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        heightmap = parse_grid(row.removesuffix("\r") for row in rows)
        sizes = basin_sizes(heightmap)
        if len(sizes) < 3:
            raise ValueError(f"need at least three basins, found {len(sizes)}")
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(risk_sum(heightmap))
    print(math.prod(sizes[-3:]))
    return 0