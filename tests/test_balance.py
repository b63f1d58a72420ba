import io

import pytest

from stackqueue.balance import check_lines, is_balanced, main

BALANCED = [
    "So when I die (the [first] I will see in (heaven) is a score list).",
    "[ first in ] ( first out ).",
    "A rope may form )( a trail in a maze."[:0] + "no brackets here.",
    " .",
]
UNBALANCED = [
    "Half Moon tonight (At least it is better than no Moon at all].",
    "A rope may form )( a trail in a maze.",
    "Help( I[m being held prisoner in a fortune cookie factory)].",
    "([ (([( [ ] ) ( ) (( ))] )) ]",
]


@pytest.mark.parametrize("line", BALANCED)
def test_balanced_lines(line):
    assert is_balanced(line) is True


@pytest.mark.parametrize("line", UNBALANCED)
def test_unbalanced_lines(line):
    assert is_balanced(line) is False


@pytest.mark.parametrize("line", BALANCED)
def test_wrapping_keeps_balance(line):
    assert is_balanced(f"([{line}])")


def test_check_lines_stops_at_terminator():
    lines = ["(.", "().", ".", "(."]
    result = list(check_lines(lines))
    assert result == [is_balanced(line) for line in lines[:2]]


def test_check_lines_ignores_line_endings():
    assert list(check_lines(["()\n", "(]\r\n", ".\n"])) == [
        is_balanced("()"),
        is_balanced("(]"),
    ]


def test_main(monkeypatch, capsys):
    lines = BALANCED[:2] + UNBALANCED[:2]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines) + "\n.\n"))
    assert main() == 0
    printed = capsys.readouterr().out.split()
    assert printed == ["yes" if is_balanced(line) else "no" for line in lines]