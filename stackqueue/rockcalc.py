"""Evaluate integer arithmetic with ``+ - * /`` and parentheses.

Malformed expressions and division by zero raise :class:`ExpressionError`.
"""

from __future__ import annotations

import sys
from collections.abc import Sequence

_DIGITS = "0123456789"


class ExpressionError(ValueError):
    """Raised when an expression cannot be evaluated."""


def _to_postfix(expression: str) -> list[int | str]:
    output: list[int | str] = []
    operators: list[str] = []
    number: int | None = None

    for index, char in enumerate(expression):
        if char in _DIGITS:
            number = int(char) if number is None else number * 10 + int(char)
            continue
        if number is not None:
            output.append(number)
            number = None
        if char == "(":
            operators.append(char)
            if expression[index + 1:index + 2] in ("", ")"):
                raise ExpressionError("empty parentheses")
        elif char == ")":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            if not operators:
                raise ExpressionError("unmatched ')'")
            operators.pop()
        elif char in "*/":
            while operators and operators[-1] in "*/":
                output.append(operators.pop())
            operators.append(char)
        elif char in "+-":
            while operators and operators[-1] != "(":
                output.append(operators.pop())
            operators.append(char)

    if number is not None:
        output.append(number)
    while operators:
        operator = operators.pop()
        if operator == "(":
            raise ExpressionError("unmatched '('")
        output.append(operator)
    return output


def _divide(left: int, right: int) -> int:
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def evaluate(expression: str) -> int:
    """Return the value of ``expression``, dividing with truncation toward zero."""
    stack: list[int] = []
    for token in _to_postfix(expression):
        if isinstance(token, int):
            stack.append(token)
            continue
        if len(stack) < 2:
            raise ExpressionError("missing operand")
        right = stack.pop()
        left = stack.pop()
        if token == "*":
            stack.append(left * right)
        elif token == "/":
            if right == 0:
                raise ExpressionError("division by zero")
            stack.append(_divide(left, right))
        elif token == "+":
            stack.append(left + right)
        else:
            stack.append(left - right)
    if len(stack) != 1:
        raise ExpressionError("malformed expression")
    return stack[0]


def main(argv: Sequence[str] | None = None) -> int:
    """Read an expression from standard input and print its value or ``ROCK``."""
    tokens = sys.stdin.read().split()
    try:
        print(evaluate(tokens[0] if tokens else ""))
    except ExpressionError:
        print("ROCK")
    return 0