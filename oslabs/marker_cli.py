"""Interactive session driving several marker threads over one array."""

from __future__ import annotations

import argparse
import sys
import threading
from collections.abc import Callable, Iterator
from typing import TextIO

from oslabs.marker import Marker, MarkerBoard


def _write(out: TextIO, board: MarkerBoard, text: str, end: str = "\n") -> None:
    with board.console_lock:
        print(text, end=end, file=out, flush=True)


def _show(out: TextIO, board: MarkerBoard, label: str) -> None:
    cells = " ".join(str(value) for value in board.snapshot())
    _write(out, board, f"{label}{cells}")


def run_session(
    size: int,
    marker_count: int,
    choose: Callable[[list[int]], int],
    output: TextIO | None = None,
) -> list[int]:
    """Run markers until every one is terminated.

    Each round waits for all active markers to block, shows the array and
    calls ``choose`` with it to get the number of the marker to terminate.
    Returns the marker numbers in the order they were terminated.
    """
    out = output if output is not None else sys.stdout
    if marker_count < 0:
        raise ValueError("number of markers must not be negative")
    board = MarkerBoard(size)
    start = threading.Event()
    markers = [Marker(n, board, start, out) for n in range(1, marker_count + 1)]
    for marker in markers:
        marker.start()
    start.set()

    terminated: list[int] = []
    active = {marker.marker_id: marker for marker in markers}
    try:
        while active:
            for marker in active.values():
                marker.wait_blocked()
            _show(out, board, "Array: ")

            while True:
                _write(out, board, f"Enter marker number to terminate (1-{marker_count}): ", end="")
                victim = choose(board.snapshot())
                if victim in active:
                    break
                _write(
                    out,
                    board,
                    f"Error: Marker {victim} does not exist or is already terminated.",
                )

            marker = active.pop(victim)
            marker.terminate()
            marker.join()
            terminated.append(victim)
            _show(out, board, f"Array after terminating marker {victim}: ")

            for other in active.values():
                other.resume()
    finally:
        for marker in markers:
            marker.terminate()
        for marker in markers:
            marker.join()

    _write(out, board, "All markers terminated.") if marker_count else print(
        "All markers terminated.", file=out, flush=True
    )
    return terminated


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_token(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _prompt_int(prompt: str, tokens: Iterator[str]) -> int:
    print(prompt, end="", flush=True)
    return int(_next_token(tokens))


def _read_choice(tokens: Iterator[str]) -> int:
    token = _next_token(tokens)
    try:
        return int(token)
    except ValueError:
        return 0


def main(argv: list[str] | None = None) -> int:
    """Ask for the array size and marker count, then run a session."""
    parser = argparse.ArgumentParser(
        prog="oslabs-marker",
        description="Marker threads competing for the cells of an array.",
    )
    parser.add_argument("size", type=int, nargs="?", help="array size")
    parser.add_argument("markers", type=int, nargs="?", help="number of marker threads")
    args = parser.parse_args(argv)

    tokens = _tokens(sys.stdin)
    try:
        size = args.size if args.size is not None else _prompt_int("Enter array size: ", tokens)
        count = (
            args.markers
            if args.markers is not None
            else _prompt_int("Enter number of marker threads: ", tokens)
        )
        run_session(size, count, lambda _cells: _read_choice(tokens))
    except EOFError:
        print("\nInput ended.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())