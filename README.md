# stackqueue

A small collection of classic puzzles that are solved with stacks, queues,
priority queues and breadth-first search. Each puzzle is an ordinary Python
function. Each one also has a command that reads the puzzle's input from
standard input and prints the answer.

## Installation

```
pip install .
```

Add the `test` extra to run the test suite:

```
pip install ".[test]"
pytest
```

## Library

| Module | Function(s) | What it does |
| --- | --- | --- |
| `stackqueue.sandcastle` | `parse_grid`, `waves_until_stable` | Parses a grid of strengths `0`–`9` and empty cells `.`, and counts the waves that pass before the sand castle stops crumbling. |
| `stackqueue.josephus` | `josephus`, `format_permutation` | Gives the Josephus elimination order of people `1..n` and formats it as `<a, b, c>`. Raises `ValueError` for a negative `n` or a `k` below 1. |
| `stackqueue.maze` | `shortest_escape` | Finds the fewest moves from `0` to `1` in a maze with walls `#`, keys `a`–`f` and doors `A`–`F`. Returns `None` if there is no way out. |
| `stackqueue.rockcalc` | `evaluate`, `ExpressionError` | Evaluates an integer expression with `+ - * /` and parentheses, dividing with truncation toward zero. Raises `ExpressionError` if the expression is malformed or divides by zero. |
| `stackqueue.counters` | `assign_counters` | The first customers take counters 1..n in order; each later one goes to the counter with the smallest total service time, the lowest number on a tie. |
| `stackqueue.postfix` | `to_postfix` | Converts an infix expression over the letters `A`–`Z` to postfix. |
| `stackqueue.brackets` | `bracket_value` | Gives the value of a bracket string, where `()` counts 2 and `[]` counts 3, nesting multiplies and neighbours add. Returns `0` if the string is invalid. |
| `stackqueue.balance` | `is_balanced`, `check_lines` | Checks whether the round and square brackets in sentences are balanced; `check_lines` stops at a line holding only `.`. |
| `stackqueue.rooftops` | `count_visible_roofs` | Counts, summed over all buildings, how many rooftops each one sees to its right before the first building at least as tall. |

Example:

```python
from stackqueue.josephus import josephus, format_permutation
from stackqueue.postfix import to_postfix
from stackqueue.brackets import bracket_value

print(format_permutation(josephus(7, 3)))   # <3, 6, 2, 7, 5, 1, 4>
print(to_postfix("A*(B+C)"))                # ABC+*
print(bracket_value("(()[[]])([])"))        # 28
```

## Commands

Every command reads its input from standard input and writes the result to
standard output:

```
echo "7 3" | stackqueue-josephus
echo "A*(B+C)" | stackqueue-postfix
echo "(()[[]])([])" | stackqueue-brackets
printf "6\n10\n3\n7\n4\n12\n2\n" | stackqueue-rooftops
```

These commands are also installed:

- `stackqueue-sandcastle` reads `h w` and the grid, and prints the wave count.
- `stackqueue-maze` reads `N M` and the maze, and prints the move count, or `-1`
  if there is no way out.
- `stackqueue-rockcalc` reads one expression and prints its value, or `ROCK`
  if it cannot be evaluated.
- `stackqueue-counters` reads `n c` and `c` service times, and prints the
  counter of each customer.
- `stackqueue-balance` reads sentences one per line until a line holding only
  `.`, and prints `yes` or `no` for each sentence.