import io
import sys

import pytest

from sonarsweep.day04 import (
    Board,
    Cell,
    first_winning_score,
    last_winning_score,
    main,
    parse_input,
)

DRAWN = [7, 4, 9, 5, 11, 17, 23, 2, 0, 14, 21, 24, 10, 16, 13, 6, 15, 25, 12, 22, 18, 20, 8, 19, 3, 26, 1]

BOARD_VALUES = [
    [22, 13, 17, 11, 0, 8, 2, 23, 4, 24, 21, 9, 14, 16, 7, 6, 10, 3, 18, 5, 1, 12, 20, 15, 19],
    [3, 15, 0, 2, 22, 9, 18, 13, 17, 5, 19, 8, 7, 25, 23, 20, 11, 10, 24, 4, 14, 21, 16, 12, 6],
    [14, 21, 17, 24, 4, 10, 16, 15, 9, 19, 18, 8, 23, 26, 20, 22, 11, 13, 6, 5, 2, 0, 12, 3, 7],
]

SAMPLE_TEXT = """7,4,9,5,11,17,23,2,0,14,21,24,10,16,13,6,15,25,12,22,18,20,8,19,3,26,1

22 13 17 11  0
 8  2 23  4 24
21  9 14 16  7
 6 10  3 18  5
 1 12 20 15 19

 3 15  0  2 22
 9 18 13 17  5
19  8  7 25 23
20 11 10 24  4
14 21 16 12  6

14 21 17 24  4
10 16 15  9 19
18  8 23 26 20
22 11 13  6  5
 2  0 12  3  7"""


def _board(values):
    return Board([Cell(value) for value in values])


@pytest.fixture
def boards():
    return [_board(values) for values in BOARD_VALUES]


def test_first_winning_score(boards):
    assert first_winning_score(boards, DRAWN) == 4512


def test_last_winning_score(boards):
    assert last_winning_score(boards, DRAWN) == 1924


def test_no_winner_scores_zero(boards):
    assert first_winning_score(boards, [7, 4]) == 0
    assert last_winning_score(boards, [7, 4]) == 0


def test_is_complete_horizontal():
    board = _board(BOARD_VALUES[0])
    assert board.is_complete() is False
    for index in range(5, 10):
        board.cells[index].marked = True
    assert board.is_complete() is True


def test_is_complete_vertical():
    board = _board(BOARD_VALUES[0])
    assert board.is_complete() is False
    for index in (2, 7, 12, 17, 22):
        board.cells[index].marked = True
    assert board.is_complete() is True


def test_mark():
    board = _board(BOARD_VALUES[0])
    expected = _board(BOARD_VALUES[0])
    expected.cells[1].marked = True
    expected.cells[16].marked = True
    board.mark(13)
    board.mark(10)
    assert board == expected


def test_unmarked_sum():
    board = _board(BOARD_VALUES[0])
    total = board.unmarked_sum()
    board.mark(22)
    assert board.unmarked_sum() == total - 22


def test_board_requires_twenty_five_cells():
    with pytest.raises(ValueError):
        Board([Cell(1)])


def test_parse_input_sample():
    boards, drawn = parse_input(SAMPLE_TEXT)
    assert drawn == DRAWN
    assert boards == [_board(values) for values in BOARD_VALUES]


def test_parse_input_without_boards():
    assert parse_input("1,2,3") == ([], [1, 2, 3])


def test_parse_input_pads_short_board():
    boards, _ = parse_input("1\n\n5 6")
    assert [cell.value for cell in boards[0].cells] == [5, 6] + [0] * 23


def test_parse_input_rejects_bad_number():
    with pytest.raises(ValueError):
        parse_input("1,x,3\n\n1 2 3")


def test_parse_input_rejects_oversized_board():
    with pytest.raises(ValueError):
        parse_input("1\n\n" + " ".join(["1"] * 26))


def test_main_prints_both_scores(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(SAMPLE_TEXT + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["4512", "1924"]