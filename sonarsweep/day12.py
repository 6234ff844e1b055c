"""Passage pathing: count routes through a system of caves."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator, Mapping, Sequence

_START = "start"
_END = "end"

Caves = dict[str, list[str]]


def is_small(name: str) -> bool:
    """Whether the cave is small, that is no letter of its name is upper case."""
    return all(not character.isalpha() or character.islower() for character in name)


def parse_caves(lines: Iterable[str]) -> Caves:
    """Build a map from each cave to its neighbours, in the order they appear."""
    caves: Caves = {}
    for line in lines:
        parts = line.split("-")
        if len(parts) < 2:
            raise ValueError(f"invalid connection: {line!r}")
        first, second = parts[0], parts[1]
        caves.setdefault(first, []).append(second)
        caves.setdefault(second, []).append(first)
    return caves


def _walk_once(caves: Mapping[str, list[str]], path: list[str]) -> Iterator[list[str]]:
    if path[-1] == _END:
        yield path
        return
    for neighbour in caves.get(path[-1], []):
        if is_small(neighbour) and neighbour in path:
            continue
        yield from _walk_once(caves, [*path, neighbour])


def find_paths(lines: Iterable[str]) -> list[list[str]]:
    """Every path from start to end that visits each small cave at most once."""
    return list(_walk_once(parse_caves(lines), [_START]))


def _walk_revisiting(
    caves: Mapping[str, list[str]], path: list[str], twice: str | None
) -> Iterator[tuple[str, ...]]:
    if path[-1] == _END:
        yield tuple(path)
        return
    for neighbour in caves.get(path[-1], []):
        extended = [*path, neighbour]
        if is_small(neighbour):
            if neighbour == _START:
                continue
            visits = path.count(neighbour)
            if neighbour == twice:
                if visits > 1:
                    continue
            elif visits > 0:
                continue
            if twice is None:
                chosen = neighbour if neighbour != _END else None
                yield from _walk_revisiting(caves, extended, chosen)
        yield from _walk_revisiting(caves, extended, twice)


def find_paths_revisiting(lines: Iterable[str]) -> list[list[str]]:
    """Every path from start to end in which one small cave may be visited twice.

    The start cave is never revisited and each path appears once.
    """
    caves = parse_caves(lines)
    unique = dict.fromkeys(_walk_revisiting(caves, [_START], None))
    return [list(path) for path in unique]


def main(argv: Sequence[str] | None = None) -> int:
    """Read cave connections from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Count paths through caves read from standard input."
    )
    parser.parse_args(argv)
    rows = sys.stdin.read().split("\n")
    if rows and rows[-1] == "":
        rows.pop()
    lines = [row.removesuffix("\r") for row in rows]
    try:
        single = find_paths(lines)
        revisiting = find_paths_revisiting(lines)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(len(single))
    print(len(revisiting))
    return 0