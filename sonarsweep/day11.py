"""Dumbo octopus: simulate flashing octopus energy levels."""

from __future__ import annotations

import argparse
import copy
import sys
from collections.abc import Iterator, Sequence

from sonarsweep.day09 import parse_grid

_FLASH_THRESHOLD = 9


def _neighbours(grid: list[list[int]], row: int, column: int) -> Iterator[tuple[int, int]]:
    for dr in (-1, 0, 1):
        for dc in (-1, 0, 1):
            r, c = row + dr, column + dc
            if (dr or dc) and 0 <= r < len(grid) and 0 <= c < len(grid[r]):
                yield r, c


def step(grid: list[list[int]]) -> int:
    """Advance the grid one step in place and return how many octopuses flashed."""
    for row in grid:
        row[:] = [value + 1 for value in row]
    pending = [
        (r, c)
        for r, row in enumerate(grid)
        for c, value in enumerate(row)
        if value > _FLASH_THRESHOLD
    ]
    flashes = 0
    while pending:
        r, c = pending.pop()
        if grid[r][c] == 0:
            continue
        flashes += 1
        grid[r][c] = 0
        for nr, nc in _neighbours(grid, r, c):
            if grid[nr][nc] != 0:
                grid[nr][nc] += 1
                if grid[nr][nc] > _FLASH_THRESHOLD:
                    pending.append((nr, nc))
    return flashes


def count_flashes(grid: list[list[int]], steps: int) -> int:
    """Total flashes over the given number of steps. Changes the grid in place."""
    return sum(step(grid) for _ in range(steps))


def first_synchronised_step(grid: list[list[int]]) -> int:
    """Number of steps until every octopus is at zero. Changes the grid in place."""
    steps = 0
    while any(value > 0 for row in grid for value in row):
        step(grid)
        steps += 1
    return steps


def main(argv: Sequence[str] | None = None) -> int:
    """Read energy levels from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Simulate octopus energy levels read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        grid = parse_grid(row.removesuffix("\r") for row in rows)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(count_flashes(copy.deepcopy(grid), 100))
    print(first_synchronised_step(grid))
    return 0