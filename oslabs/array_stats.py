"""Replace the minimum and maximum of an array with its average.

The extremes and the average are computed by two worker threads running
side by side, each pausing briefly per element.
"""

from __future__ import annotations

import sys
import time
from collections.abc import Iterator, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import TextIO

_MIN_MAX_DELAY = 0.007
_AVERAGE_DELAY = 0.012


def min_max(values: Sequence[int]) -> tuple[int, int]:
    """Return the smallest and largest element of ``values``."""
    if not values:
        raise ValueError("cannot take the extremes of an empty array")
    low = high = values[0]
    for value in values[1:]:
        if value < low:
            low = value
        time.sleep(_MIN_MAX_DELAY)
        if value > high:
            high = value
        time.sleep(_MIN_MAX_DELAY)
    return low, high


def average(values: Sequence[int]) -> float:
    """Return the arithmetic mean of ``values``."""
    if not values:
        raise ValueError("cannot average an empty array")
    total = 0
    for value in values:
        total += value
        time.sleep(_AVERAGE_DELAY)
    return total / len(values)


def _statistics(values: Sequence[int]) -> tuple[int, int, float]:
    with ThreadPoolExecutor(max_workers=2) as pool:
        extremes = pool.submit(min_max, values)
        mean = pool.submit(average, values)
        low, high = extremes.result()
        avg = mean.result()
    return low, high, avg


def _replace(values: Sequence[int], low: int, high: int, avg: float) -> list[int]:
    replacement = int(avg)
    return [replacement if value in (low, high) else value for value in values]


def replace_extremes(values: Sequence[int]) -> list[int]:
    """Return a copy of ``values`` with every minimum and maximum replaced by
    the average truncated toward zero."""
    items = list(values)
    low, high, avg = _statistics(items)
    return _replace(items, low, high, avg)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int:
    try:
        token = next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None
    return int(token)


def main(argv: list[str] | None = None) -> int:
    """Read an array from standard input and print it with its extremes replaced."""
    del argv
    tokens = _tokens(sys.stdin)
    try:
        size = 0
        while size <= 0:
            print("Enter the size of the array: ", end="", flush=True)
            size = _next_int(tokens)
        print("Enter the elements of the array: ", end="", flush=True)
        values = [_next_int(tokens) for _ in range(size)]
    except EOFError:
        print("\nInput ended before the array was complete.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"\nInvalid number: {exc}", file=sys.stderr)
        return 1

    low, high, avg = _statistics(values)
    print(f"Min: {low}, Max: {high}")
    print(f"Average: {avg:g}")
    result = _replace(values, low, high, avg)
    print("Modified array: " + " ".join(str(value) for value in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())