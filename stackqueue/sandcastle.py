"""Count the waves a sandcastle takes to stop crumbling.

Each cell holds a strength from 0 to 9, or nothing (``.``). A cell falls
once the number of empty cells around it (all eight directions) reaches its
strength; every cell that falls empties its place for the next wave.
"""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterable, Sequence

Grid = list[list["int | None"]]

_NEIGHBOURS = ((1, 1), (1, -1), (1, 0), (-1, 1), (-1, -1), (-1, 0), (0, 1), (0, -1))
_DIGITS = "0123456789"


def parse_grid(lines: Iterable[str]) -> Grid:
    """Turn text rows into a grid of strengths, with ``None`` for empty cells."""
    grid: Grid = []
    for line in lines:
        row: list[int | None] = []
        for char in line.strip():
            if char == ".":
                row.append(None)
            elif char in _DIGITS:
                row.append(int(char))
            else:
                raise ValueError(f"unexpected cell {char!r}")
        grid.append(row)
    if any(len(row) != len(grid[0]) for row in grid):
        raise ValueError("rows differ in width")
    return grid


def waves_until_stable(grid: Sequence[Sequence[int | None]]) -> int:
    """Return the number of waves after which no more cells fall."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    strength = [list(row) for row in grid]
    wave: dict[tuple[int, int], int] = {}
    queue: deque[tuple[int, int]] = deque()

    for r, row in enumerate(grid[1:-1], start=1):
        for c, value in enumerate(row[1:-1], start=1):
            if value is None:
                continue
            empty = sum(1 for dr, dc in _NEIGHBOURS if grid[r + dr][c + dc] is None)
            strength[r][c] = value - empty
            if strength[r][c] <= 0:
                wave[(r, c)] = 1
                queue.append((r, c))

    while queue:
        r, c = queue.popleft()
        for dr, dc in _NEIGHBOURS:
            nr, nc = r + dr, c + dc
            if not (0 <= nr < height and 0 <= nc < width):
                continue
            current = strength[nr][nc]
            if current is None:
                continue
            current -= 1
            strength[nr][nc] = current
            if (nr, nc) not in wave and current <= 0:
                wave[(nr, nc)] = wave[(r, c)] + 1
                queue.append((nr, nc))

    return max(wave.values(), default=0)


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``h w`` and the grid from standard input and print the wave count."""
    tokens = sys.stdin.read().split()
    height, width = int(tokens[0]), int(tokens[1])
    cells = "".join(tokens[2:])
    rows = [cells[start:start + width] for start in range(0, height * width, width)]
    print(waves_until_stable(parse_grid(rows)))
    return 0