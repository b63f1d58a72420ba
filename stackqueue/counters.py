"""Assign customers to checkout counters.

The first customers take counters 1..n in order; each later customer goes to
the counter whose accumulated service time is smallest, the lowest-numbered
one on a tie.
"""

from __future__ import annotations

import heapq
import sys
from collections.abc import Iterable, Sequence


def assign_counters(counter_count: int, service_times: Iterable[int]) -> list[int]:
    """Return the counter number each customer is served at."""
    if counter_count < 1:
        raise ValueError("there must be at least one counter")
    heap: list[tuple[int, int]] = []
    assignment: list[int] = []
    for index, time in enumerate(service_times):
        if index < counter_count:
            counter = index + 1
            heapq.heappush(heap, (time, counter))
        else:
            total, counter = heapq.heappop(heap)
            heapq.heappush(heap, (total + time, counter))
        assignment.append(counter)
    return assignment


def main(argv: Sequence[str] | None = None) -> int:
    """Read ``n c`` and ``c`` service times from standard input and print counters."""
    tokens = [int(token) for token in sys.stdin.read().split()]
    counter_count, customers = tokens[0], tokens[1]
    times = tokens[2:2 + customers]
    print(" ".join(str(counter) for counter in assign_counters(counter_count, times)))
    return 0