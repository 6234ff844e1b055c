import io

import pytest

from sonarsweep.day10 import (
    completion_score,
    first_illegal_character,
    main,
    middle_completion_score,
    syntax_error_score,
)

EXAMPLE = [
    "[({(<(())[]>[[{[]{<()<>>",
    "[(()[<>])]({[<{<<[]>>(",
    "{([(<{}[<>[]}>{[]{[(<()>",
    "(((({<>}<{<{<>}{[]{[]{}",
    "[[<[([]))<([[{}[[()]]]",
    "[{[{({}]{}}([{[{{{}}([]",
    "{<[[]]>}<{[{[{[]{()[[[]",
    "[<(<(<(<{}))><([]([]()",
    "<{([([[(<>()){}]>(<<{{",
    "<{([{{}}[<[[[<>{}]]]>[]]",
]


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("{([(<{}[<>[]}>{[]{[(<()>", "}"),
        ("[[<[([]))<([[{}[[()]]]", ")"),
        ("[{[{({}]{}}([{[{{{}}([]", "]"),
        ("[<(<(<(<{}))><([]([]()", ")"),
        ("<{([([[(<>()){}]>(<<{{", ">"),
    ],
)
def test_first_illegal_character(line, expected):
    assert first_illegal_character(line) == expected


def test_first_illegal_character_incomplete_line():
    assert first_illegal_character("[({(<(())[]>[[{[]{<()<>>") is None


@pytest.mark.parametrize(
    ("line", "expected"),
    [
        ("[({(<(())[]>[[{[]{<()<>>", 288957),
        ("[(()[<>])]({[<{<<[]>>(", 5566),
        ("(((({<>}<{<{<>}{[]{[]{}", 1480781),
        ("{<[[]]>}<{[{[{[]{()[[[]", 995444),
        ("<{([{{}}[<[[[<>{}]]]>[]]", 294),
    ],
)
def test_completion_score(line, expected):
    assert completion_score(line) == expected


def test_completion_score_corrupted_line():
    assert completion_score("{([(<{}[<>[]}>{[]{[(<()>") == 0


def test_unbalanced_closer_raises():
    with pytest.raises(ValueError):
        completion_score(")")


def test_syntax_error_score():
    assert syntax_error_score(EXAMPLE) == 26397


def test_middle_completion_score():
    assert middle_completion_score(EXAMPLE) == 288957


def test_middle_completion_score_without_incomplete_lines():
    with pytest.raises(ValueError):
        middle_completion_score(["()"])


def test_main(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(EXAMPLE) + "\n"))
    assert main([]) == 0
    assert capsys.readouterr().out.split() == ["26397", "288957"]