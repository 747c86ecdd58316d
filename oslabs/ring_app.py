"""Receiver and sender processes exchanging messages through a ring buffer."""

from __future__ import annotations

import subprocess
import sys
import time
from collections.abc import Iterator

from oslabs.ring_buffer import MESSAGE_SIZE, BufferEmpty, RingBuffer, RingBufferError

_START_DELAY = 0.2
_RETRY_DELAY = 0.5


def _next_line(lines: Iterator[str]) -> str:
    try:
        return next(lines).rstrip("\r\n")
    except StopIteration:
        raise EOFError("input ended") from None


def _start_sender(filename: str) -> None:
    flags = getattr(subprocess, "CREATE_NEW_CONSOLE", 0)
    command = [sys.executable, "-m", "oslabs.ring_app", "sender", filename]
    subprocess.Popen(command, creationflags=flags)


def receiver_main(argv: list[str] | None = None) -> int:
    """Create the buffer, start senders and read messages on command."""
    del argv
    lines = iter(sys.stdin)
    try:
        print("Enter binary file name: ", end="", flush=True)
        filename = _next_line(lines)
        print("Enter message buffer capacity: ", end="", flush=True)
        capacity = int(_next_line(lines))
        print("Enter number of sender processes: ", end="", flush=True)
        sender_count = int(_next_line(lines))
    except EOFError:
        print("\nInput ended.", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    try:
        ring = RingBuffer(filename, capacity)
        for _ in range(sender_count):
            _start_sender(filename)
            time.sleep(_START_DELAY)
        print("All sender processes started.")

        while True:
            print("Enter command (read/exit): ", end="", flush=True)
            command = next(lines, None)
            if command is None:
                break
            command = command.rstrip("\r\n")
            if command == "read":
                try:
                    print(f"Received: {ring.read_message()}")
                except BufferEmpty:
                    print("Waiting for messages...")
            elif command == "exit":
                print("Receiver exiting...")
                break
            else:
                print("Unknown command.")
    except (RingBufferError, ValueError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
    return 0


def sender_main(argv: list[str] | None = None) -> int:
    """Open an existing buffer and send messages typed on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Usage: sender <filename>", file=sys.stderr)
        return 1

    try:
        ring = RingBuffer(args[0])
    except RingBufferError as exc:
        print(f"Error in sender: {exc}", file=sys.stderr)
        return 1

    print("Sender ready")
    lines = iter(sys.stdin)
    while True:
        print("Enter command (send/exit): ", end="", flush=True)
        command = next(lines, None)
        if command is None:
            break
        command = command.rstrip("\r\n")
        if command == "send":
            print("Enter message: ", end="", flush=True)
            message = next(lines, "").rstrip("\r\n")
            if len(message.encode("utf-8")) >= MESSAGE_SIZE:
                print(f"Message too long (max {MESSAGE_SIZE - 1} chars).")
                continue
            while True:
                try:
                    ring.write_message(message)
                except RingBufferError:
                    print("Waiting for space...")
                    time.sleep(_RETRY_DELAY)
                else:
                    print("Message sent.")
                    break
        elif command == "exit":
            print("Sender exiting...")
            break
        else:
            print("Unknown command.")
    return 0


def _dispatch(argv: list[str]) -> int:
    if argv and argv[0] == "sender":
        return sender_main(argv[1:])
    if argv and argv[0] == "receiver":
        return receiver_main(argv[1:])
    return receiver_main(argv)


if __name__ == "__main__":
    raise SystemExit(_dispatch(sys.argv[1:]))