"""Binary diagnostic: power consumption and life support ratings."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

_BINARY = re.compile(r"[+-]?[01]+")
_INT16_MIN = -(1 << 15)
_INT16_MAX = (1 << 15) - 1


@dataclass(frozen=True)
class BitCount:
    """How many ones and zeros appear at one bit position."""

    one: int = 0
    zero: int = 0


Selector = Callable[[BitCount], int]


def most_common_bit(count: BitCount) -> int:
    """Return the more common bit, preferring 1 on a tie."""
    ones, zeros = count.one, count.zero
    return int(ones >= zeros)


def least_common_bit(count: BitCount) -> int:
    """Return the less common bit, preferring 0 on a tie."""
    return 1 - most_common_bit(count)


def parse_report(lines: Iterable[str]) -> tuple[list[int], int]:
    """Parse binary report lines.

    Returns the values and the bit width, taken from the length of the
    last line. Each value must fit a signed 16-bit integer.
    """
    report: list[int] = []
    number_of_bits = 0
    for line in lines:
        number_of_bits = len(line)
        if not _BINARY.fullmatch(line):
            raise ValueError(f"invalid binary number: {line!r}")
        value = int(line, 2)
        if not _INT16_MIN <= value <= _INT16_MAX:
            raise ValueError(f"binary number out of range: {line!r}")
        report.append(value)
    return report, number_of_bits


def _count_bits(values: Sequence[int], position: int) -> BitCount:
    ones = sum((value >> position) & 1 for value in values)
    return BitCount(one=ones, zero=len(values) - ones)


def calculate_rate(report: Sequence[int], number_of_bits: int, selector: Selector) -> int:
    """Build a rate from the bit the selector picks at each position."""
    rate = 0
    for position in range(number_of_bits):
        rate |= selector(_count_bits(report, position)) << position
    return rate


def calculate_rating(report: Sequence[int], number_of_bits: int, selector: Selector) -> int:
    """Filter the report bit by bit, from the highest, until one value is left."""
    remaining = list(report)
    for position in reversed(range(number_of_bits)):
        if len(remaining) == 1:
            break
        wanted = selector(_count_bits(remaining, position))
        remaining = [value for value in remaining if (value >> position) & 1 == wanted]
    if not remaining:
        raise ValueError("no report value matches the bit criteria")
    return remaining[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Read a diagnostic report from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Analyse a binary diagnostic report read from standard input."
    )
    parser.parse_args(argv)
    lines = sys.stdin.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    try:
        report, bits = parse_report(line.removesuffix("\r") for line in lines)
        epsilon = calculate_rate(report, bits, least_common_bit)
        gamma = calculate_rate(report, bits, most_common_bit)
        generator = calculate_rating(report, bits, most_common_bit)
        scrubber = calculate_rating(report, bits, least_common_bit)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(epsilon * gamma)
    print(generator * scrubber)
    return 0