"""Seven segment search: decode scrambled display outputs."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Sequence

_UNIQUE_LENGTHS = {2: 1, 3: 7, 4: 4, 7: 8}


def count_unique_digits(outputs: Iterable[str]) -> int:
    """Count output words whose segment count identifies a single digit."""
    return sum(
        1 for output in outputs for word in output.split() if len(word) in _UNIQUE_LENGTHS
    )


def decode_entry(patterns: str, digits: str) -> int:
    """Decode the output digits of one entry using its signal patterns."""
    known: dict[int, set[str]] = {}
    for pattern in patterns.split():
        digit = _UNIQUE_LENGTHS.get(len(pattern))
        if digit is not None:
            known[digit] = set(pattern)

    def shared(digit: int, word: str) -> int:
        if digit not in known:
            raise ValueError(f"no signal pattern identifies the digit {digit}")
        return sum(1 for segment in word if segment in known[digit])

    value = 0
    for word in digits.split():
        length = len(word)
        if length in _UNIQUE_LENGTHS:
            digit = _UNIQUE_LENGTHS[length]
        elif length == 6:
            if shared(4, word) == 4:
                digit = 9
            elif shared(1, word) != 2:
                digit = 6
            else:
                digit = 0
        elif shared(1, word) == 2:
            digit = 3
        elif shared(4, word) == 2:
            digit = 2
        else:
            digit = 5
        value = value * 10 + digit
    return value


def decode_total(entries: Iterable[tuple[str, str]]) -> int:
    """Sum the decoded output values of every (patterns, digits) entry."""
    return sum(decode_entry(patterns, digits) for patterns, digits in entries)


def main(argv: Sequence[str] | None = None) -> int:
    """Read display notes from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Decode seven segment displays read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    try:
        entries = []
        for row in rows:
            parts = row.removesuffix("\r").split("|")
            if len(parts) < 2:
                raise ValueError(f"missing '|' separator: {row!r}")
            entries.append((parts[0], parts[1]))
        unique = count_unique_digits(digits for _, digits in entries)
        total = decode_total(entries)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(unique)
    print(total)
    return 0