"""Dive: follow submarine course instructions."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, replace

_INSTRUCTION = re.compile(r"(down|forward|up) ([0-9]+)")


@dataclass(frozen=True)
class Position:
    """Horizontal position, depth and aim of the submarine."""

    x: int = 0
    depth: int = 0
    aim: int = 0


def _commands(instructions: Iterable[str]) -> Iterator[tuple[str, int]]:
    for instruction in instructions:
        match = _INSTRUCTION.fullmatch(instruction)
        if match:
            yield match[1], int(match[2])


def parse_instructions(instructions: Iterable[str]) -> Position:
    """Apply instructions where up and down change depth directly.

    Lines that are not recognised instructions are ignored.
    """
    position = Position()
    for direction, value in _commands(instructions):
        match direction:
            case "down":
                position = replace(position, depth=position.depth + value)
            case "up":
                position = replace(position, depth=position.depth - value)
            case "forward":
                position = replace(position, x=position.x + value)
    return position


def parse_aimed_instructions(instructions: Iterable[str]) -> Position:
    """Apply instructions where up and down change the aim.

    Lines that are not recognised instructions are ignored.
    """
    position = Position()
    for direction, value in _commands(instructions):
        match direction:
            case "down":
                position = replace(position, aim=position.aim + value)
            case "up":
                position = replace(position, aim=position.aim - value)
            case "forward":
                position = replace(
                    position,
                    x=position.x + value,
                    depth=position.depth + position.aim * value,
                )
    return position


def main(argv: Sequence[str] | None = None) -> int:
    """Read instructions from standard input and print both answers."""
    parser = argparse.ArgumentParser(
        description="Follow course instructions read from standard input."
    )
    parser.parse_args(argv)
    lines = sys.stdin.read().split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    instructions = [line.removesuffix("\r") for line in lines]
    plain = parse_instructions(instructions)
    aimed = parse_aimed_instructions(instructions)
    print(plain.depth * plain.x)
    print(aimed.depth * aimed.x)
    return 0