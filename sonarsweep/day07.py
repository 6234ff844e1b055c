"""Treachery of whales: align crabs at the cheapest position."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Sequence

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _cheapest(positions: Sequence[int], cost: Callable[[int], int]) -> int:
    furthest = max([0, *positions])
    return min(
        sum(cost(abs(target - position)) for position in positions)
        for target in range(furthest + 1)
    )


def cheapest_linear_cost(positions: Sequence[int]) -> int:
    """Least fuel to align, where each step costs one unit."""
    return _cheapest(positions, lambda distance: distance)


def cheapest_triangular_cost(positions: Sequence[int]) -> int:
    """Least fuel to align, where each further step costs one more than the last."""
    return _cheapest(positions, lambda distance: distance * (distance + 1) // 2)


def main(argv: Sequence[str] | None = None) -> int:
    """Read crab positions from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Find the cheapest crab alignment from positions read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        positions = [
            _parse_int(value)
            for row in rows
            for value in row.removesuffix("\r").split(",")
        ]
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(cheapest_linear_cost(positions))
    print(cheapest_triangular_cost(positions))
    return 0