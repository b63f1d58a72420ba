"""Count how many rooftops the building managers can see.

Each building looks to the right and sees every roof until the first
building at least as tall as itself.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence


def count_visible_roofs(heights: Iterable[int]) -> int:
    """Return the total number of roofs visible over all buildings."""
    taller: list[int] = []
    total = 0
    for height in heights:
        while taller and taller[-1] <= height:
            taller.pop()
        total += len(taller)
        taller.append(height)
    return total


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``N`` and ``N`` heights from standard input and print the count."""
    tokens = [int(token) for token in sys.stdin.read().split()]
    print(count_visible_roofs(tokens[1:1 + tokens[0]]))
    return 0