"""The Josephus elimination order."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence


def josephus(n: int, k: int) -> list[int]:
    """Return the order in which people 1..n leave when every k-th is removed."""
    if n < 0:
        raise ValueError("n must not be negative")
    if k < 1:
        raise ValueError("k must be at least 1")
    circle = deque(range(1, n + 1))
    order: list[int] = []
    while circle:
        circle.rotate(-(k - 1))
        order.append(circle.popleft())
    return order


def format_permutation(order: Iterable[int]) -> str:
    """Render an order as ``<a, b, c>``."""
    return "<" + ", ".join(str(person) for person in order) + ">"


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``N K`` from standard input and print the elimination order."""
    n, k = (int(token) for token in sys.stdin.read().split()[:2])
    print(format_permutation(josephus(n, k)))
    return 0