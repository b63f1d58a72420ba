"""Stack, queue and breadth-first search puzzles with command-line front ends."""

__version__ = "0.1.0"