"""Giant squid: play bingo against a set of boards."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Sequence
from dataclasses import dataclass, field
from itertools import chain

BOARD_SIZE = 5
_CELL_COUNT = BOARD_SIZE * BOARD_SIZE
_INTEGER = re.compile(r"[+-]?[0-9]+")


def _parse_int(text: str) -> int:
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer: {text!r}")
    return int(text)


@dataclass
class Cell:
    """A number on a board and whether it has been drawn."""

    value: int
    marked: bool = False


@dataclass
class Board:
    """A five by five bingo board, stored row by row."""

    cells: list[Cell] = field(default_factory=lambda: [Cell(0) for _ in range(_CELL_COUNT)])

    def __post_init__(self) -> None:
        if len(self.cells) != _CELL_COUNT:
            raise ValueError(f"a board holds {_CELL_COUNT} cells, not {len(self.cells)}")

    def mark(self, number: int) -> None:
        """Mark every cell holding the number."""
        for cell in self.cells:
            if cell.value == number:
                cell.marked = True

    def is_complete(self) -> bool:
        """Whether a whole row or a whole column is marked."""
        rows = (self.cells[start : start + BOARD_SIZE] for start in range(0, _CELL_COUNT, BOARD_SIZE))
        columns = (self.cells[column::BOARD_SIZE] for column in range(BOARD_SIZE))
        return any(all(cell.marked for cell in line) for line in chain(rows, columns))

    def unmarked_sum(self) -> int:
        """Sum of the values of all unmarked cells."""
        return sum(cell.value for cell in self.cells if not cell.marked)


def _board_from_block(block: str) -> Board:
    values = [_parse_int(item) for item in block.split()]
    if len(values) > _CELL_COUNT:
        raise ValueError(f"a board holds at most {_CELL_COUNT} numbers")
    values.extend([0] * (_CELL_COUNT - len(values)))
    return Board([Cell(value) for value in values])


def parse_input(text: str) -> tuple[list[Board], list[int]]:
    """Parse the drawn numbers line and the blank-line separated boards."""
    header, separator, rest = text.partition("\n")
    drawn_numbers = [_parse_int(item) for item in header.split(",")]
    boards = [_board_from_block(block) for block in rest.split("\n\n")] if separator else []
    return boards, drawn_numbers


def first_winning_score(boards: Sequence[Board], drawn_numbers: Sequence[int]) -> int:
    """Score of the first board to win, or 0 if none does. Marks boards in place."""
    for number in drawn_numbers:
        for board in boards:
            board.mark(number)
            if board.is_complete():
                return board.unmarked_sum() * number
    return 0


def last_winning_score(boards: Sequence[Board], drawn_numbers: Sequence[int]) -> int:
    """Score of the last board to win, or 0 if none does. Marks boards in place."""
    won: set[int] = set()
    score = 0
    for number in drawn_numbers:
        for index, board in enumerate(boards):
            board.mark(number)
            if index not in won and board.is_complete():
                won.add(index)
                score = board.unmarked_sum() * number
    return score


def main(argv: Sequence[str] | None = None) -> int:
    """Read a bingo game from standard input and print both scores."""
    parser = argparse.ArgumentParser(
        description="Play bingo with numbers and boards read from standard input."
    )
    parser.parse_args(argv)
    text = sys.stdin.read()
    try:
        boards, drawn_numbers = parse_input(text)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    print(first_winning_score(boards, drawn_numbers))
    fresh_boards, _ = parse_input(text)
    print(last_winning_score(fresh_boards, drawn_numbers))
    return 0