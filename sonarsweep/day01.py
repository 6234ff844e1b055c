"""Sonar sweep: count how often depth measurements increase."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from itertools import pairwise
from typing import TextIO

_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


def _read_lines(stream: TextIO) -> list[str]:
    lines = stream.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line.removesuffix("\r") for line in lines]


def count_increases(measurements: Sequence[int]) -> int:
    """Count measurements that are larger than the one before them."""
    return sum(1 for previous, current in pairwise(measurements) if current > previous)


def measurement_windows(measurements: Sequence[int]) -> list[int]:
    """Return the sums of every three-measurement sliding window."""
    return [
        first + second + third
        for first, second, third in zip(measurements, measurements[1:], measurements[2:])
    ]


def count_window_increases(measurements: Sequence[int]) -> int:
    """Count increases between consecutive three-measurement windows."""
    return count_increases(measurement_windows(measurements))


def main(argv: Sequence[str] | None = None) -> int:
    """Read depth measurements from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Count depth increases read from standard input."
    )
    parser.parse_args(argv)
    try:
        measurements = [_parse_int(line) for line in _read_lines(sys.stdin)]
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(count_increases(measurements))
    print(count_window_increases(measurements))
    return 0