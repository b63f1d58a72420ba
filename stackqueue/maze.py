"""Shortest way out of a maze with keys and doors.

``0`` is the start, ``1`` the exit, ``#`` a wall, ``a``-``f`` keys and
``A``-``F`` doors that need the matching key.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Sequence

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def shortest_escape(grid: Sequence[str]) -> int | None:
    """Return the fewest moves from a start to an exit, or ``None`` if none exists."""
    rows = list(grid)
    if any(len(row) != len(rows[0]) for row in rows):
        raise ValueError("rows differ in width")
    height = len(rows)
    width = len(rows[0]) if rows else 0

    distance: dict[tuple[int, int, int], int] = {}
    queue: deque[tuple[int, int, int]] = deque()
    for r, row in enumerate(rows):
        for c, cell in enumerate(row):
            if cell == "0":
                distance[(r, c, 0)] = 0
                queue.append((r, c, 0))

    while queue:
        state = queue.popleft()
        r, c, keys = state
        steps = distance[state]
        for dr, dc in _STEPS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            cell = rows[nr][nc]
            if cell == "#":
                continue
            if cell == "1":
                return steps + 1
            new_keys = keys
            if "a" <= cell <= "f":
                new_keys = keys | 1 << (ord(cell) - ord("a"))
            elif "A" <= cell <= "F" and not keys & 1 << (ord(cell) - ord("A")):
                continue
            following = (nr, nc, new_keys)
            if following in distance:
                continue
            distance[following] = steps + 1
            queue.append(following)
    return None


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``N M`` and the maze from standard input and print the move count."""
    tokens = sys.stdin.read().split()
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    rows = [cells[start:start + width] for start in range(0, height * width, width)]
    result = shortest_escape(rows)
    print(-1 if result is None else result)
    return 0