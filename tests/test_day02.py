import io
import sys

from sonarsweep.day02 import Position, main, parse_aimed_instructions, parse_instructions

SAMPLE = [
    "forward 5",
    "down 5",
    "forward 8",
    "up 3",
    "down 8",
    "forward 2",
]


def test_parse_instructions_sample():
    assert parse_instructions(SAMPLE) == Position(x=15, depth=10, aim=0)


def test_parse_aimed_instructions_sample():
    assert parse_aimed_instructions(SAMPLE) == Position(x=15, depth=60, aim=10)


def test_unrecognised_instructions_are_ignored():
    result = parse_instructions(["sideways 4", "down 3", "forward -2", "forward 2 "])
    assert result == Position(x=0, depth=3, aim=0)


def test_empty_instructions_stay_at_origin():
    assert parse_aimed_instructions([]) == Position()


def test_main_prints_both_products(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("\n".join(SAMPLE) + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["150", "900"]