"""Convert infix expressions over capital letters to postfix notation."""

from __future__ import annotations

import sys
from collections.abc import Sequence


def to_postfix(expression: str) -> str:
    """Return ``expression`` rewritten in postfix order."""
    output: list[str] = []
    operators: list[str] = []
    for char in expression:
        if "A" <= char <= "Z":
            output.append(char)
        elif char == "(":
            operators.append(char)
        elif char in "*/":
            while operators and operators[-1] in "*/":
                output.append(operators.pop())
            operators.append(char)
        elif char in "+-":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            operators.append(char)
        elif char == ")":
            while operators:
                operator = operators.pop()
                if operator == "(":
                    break
                output.append(operator)
    output.extend(reversed(operators))
    return "".join(output)


def main(argv: Sequence[str] | None = None) -> int:
    """Read an infix expression from standard input and print its postfix form."""
    tokens = sys.stdin.read().split()
    print(to_postfix(tokens[0] if tokens else ""))
    return 0