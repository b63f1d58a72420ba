"""Value of a bracket string: ``()`` is 2, ``[]`` is 3, nesting multiplies
and juxtaposition adds. A malformed string is worth 0."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def bracket_value(text: str) -> int:
    """Return the value of ``text``, or 0 when its brackets do not match.

    Any character other than ``(``, ``[`` and ``)`` closes a square bracket.
    """
    stack: list[int | str] = []
    for char in text:
        if char in "([":
            stack.append(char)
            continue
        opener, factor = ("(", 2) if char == ")" else ("[", 3)
        inner = 0
        while stack and isinstance(stack[-1], int):
            inner += stack.pop()
        if not stack or stack[-1] != opener:
            return 0
        stack.pop()
        stack.append((inner or 1) * factor)

    total = 0
    for item in stack:
        if isinstance(item, str):
            return 0
        total += item
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read a bracket string from standard input and print its value."""
    tokens = sys.stdin.read().split()
    print(bracket_value(tokens[0] if tokens else ""))
    return 0