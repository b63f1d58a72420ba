"""Check that round and square brackets in lines of text are balanced."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator, Sequence

_OPENERS = {")": "(", "]": "["}


def is_balanced(line: str) -> bool:
    """Return whether every bracket in ``line`` is closed in the right order."""
    stack: list[str] = []
    for char in line:
        if char in "([":
            stack.append(char)
        elif char in _OPENERS:
            if not stack or stack[-1] != _OPENERS[char]:
                return False
            stack.pop()
    return not stack


def check_lines(lines: Iterable[str]) -> Iterator[bool]:
    """Yield the balance of each line until a line holding only ``.``."""
    for raw in lines:
        line = raw.rstrip("\r\n")
        if line == ".":
            return
        yield is_balanced(line)


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``yes`` or ``no`` for each line of standard input."""
    for balanced in check_lines(sys.stdin):
        print("yes" if balanced else "no")
    return 0