"""Syntax scoring: find corrupted and incomplete chunk lines."""

from __future__ import annotations

import argparse
import sys
from collections import Counter
from collections.abc import Iterable, Sequence

_CLOSERS = {"(": ")", "[": "]", "{": "}", "<": ">"}
_ERROR_POINTS = {")": 3, "]": 57, "}": 1197, ">": 25137}
_COMPLETION_POINTS = {")": 1, "]": 2, "}": 3, ">": 4}


class _Corrupted(Exception):
    def __init__(self, character: str) -> None:
        super().__init__(character)
        self.character = character


def _expected_closers(line: str) -> list[str]:
    stack: list[str] = []
    for character in line:
        closer = _CLOSERS.get(character)
        if closer is not None:
            stack.append(closer)
        elif not stack:
            raise ValueError(f"unexpected {character!r} with no open chunk")
        elif character == stack[-1]:
            stack.pop()
        else:
            raise _Corrupted(character)
    return stack


def first_illegal_character(line: str) -> str | None:
    """Return the first character that closes a chunk wrongly, or None."""
    try:
        _expected_closers(line)
    except _Corrupted as corrupted:
        return corrupted.character
    return None


def completion_score(line: str) -> int:
    """Score of the characters that complete the line; 0 if it is corrupted."""
    try:
        stack = _expected_closers(line)
    except _Corrupted:
        return 0
    score = 0
    for closer in reversed(stack):
        score = score * 5 + _COMPLETION_POINTS[closer]
    return score


def syntax_error_score(lines: Iterable[str]) -> int:
    """Total score of the first illegal character of every corrupted line."""
    counts = Counter(first_illegal_character(line) for line in lines)
    return sum(counts[character] * points for character, points in _ERROR_POINTS.items())


def middle_completion_score(lines: Iterable[str]) -> int:
    """Middle of the sorted non-zero completion scores."""
    scores = sorted(score for score in map(completion_score, lines) if score > 0)
    if not scores:
        raise ValueError("no incomplete lines")
    return scores[len(scores) // 2]


def main(argv: Sequence[str] | None = None) -> int:
    """Read chunk lines from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Score chunk lines read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    lines = [row.removesuffix("\r") for row in rows]
    try:
        error_score = syntax_error_score(lines)
        middle = middle_completion_score(lines)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(error_score)
    print(middle)
    return 0