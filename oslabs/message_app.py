"""Receiver and sender processes exchanging messages through a slot file."""

from __future__ import annotations

import os
import subprocess
import sys
import time
from collections.abc import Iterator
from pathlib import Path
from typing import TextIO

from oslabs.message_file import create_message_file, read_message, write_message

MAX_SENDERS = 10
_POLL_INTERVAL = 0.05


def _ready_marker(path: str, sender_id: int) -> Path:
    return Path(f"{os.fspath(path)}.ready{sender_id}")


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _prompt(text: str, tokens: Iterator[str]) -> str:
    print(text, end="", flush=True)
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("input ended") from None


def _start_senders(filename: str, count: int, slots: int) -> list[subprocess.Popen]:
    flags = getattr(subprocess, "CREATE_NEW_CONSOLE", 0)
    processes = []
    for sender_id in range(count):
        _ready_marker(filename, sender_id).unlink(missing_ok=True)
        command = [
            sys.executable, "-m", "oslabs.message_app", "sender",
            filename, str(sender_id), str(slots),
        ]
        try:
            processes.append(subprocess.Popen(command, creationflags=flags))
        except OSError:
            print(f"[Receiver] Failed to start Sender {sender_id}", file=sys.stderr)
    return processes


def _wait_ready(filename: str, processes: list[subprocess.Popen], count: int) -> None:
    pending = set(range(count))
    while pending:
        pending = {i for i in pending if not _ready_marker(filename, i).exists()}
        if pending and all(proc.poll() is not None for proc in processes):
            return
        if pending:
            time.sleep(_POLL_INTERVAL)


def receiver_main(argv: list[str] | None = None) -> int:
    """Create the slot file, start the senders and read messages on command."""
    del argv
    tokens = _tokens(sys.stdin)
    try:
        filename = _prompt("Enter binary file name: ", tokens)
        slots = int(_prompt("Enter number of message slots: ", tokens))
        create_message_file(filename, slots)
        count = int(_prompt(f"Enter number of Sender processes (max {MAX_SENDERS}): ", tokens))
        if not 0 <= count <= MAX_SENDERS:
            raise ValueError(f"number of senders must be between 0 and {MAX_SENDERS}")
    except EOFError:
        print("\nInput ended.", file=sys.stderr)
        return 1
    except (ValueError, OSError) as exc:
        print(f"\n[Receiver] {exc}", file=sys.stderr)
        return 1

    processes = _start_senders(filename, count, slots)
    try:
        _wait_ready(filename, processes, count)
        print("[Receiver] All Senders are ready.")
        head = 0
        while True:
            print("[Receiver] Enter command (read/exit): ", end="", flush=True)
            command = next(tokens, None)
            if command is None or command == "exit":
                break
            if command == "read":
                text, head = read_message(filename, slots, head)
                if text is None:
                    print("[Receiver] No new messages.")
                else:
                    print(f"[Receiver] Message: {text}")
    finally:
        for proc in processes:
            proc.terminate()
            proc.wait()
        for sender_id in range(count):
            _ready_marker(filename, sender_id).unlink(missing_ok=True)
    return 0


def sender_main(argv: list[str] | None = None) -> int:
    """Signal readiness, then send messages typed on standard input."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 3:
        print("Usage: Sender <filename> <id> <messageCount>", file=sys.stderr)
        return 1
    filename = args[0]
    try:
        sender_id = int(args[1])
        slots = int(args[2])
    except ValueError:
        print("Usage: Sender <filename> <id> <messageCount>", file=sys.stderr)
        return 1

    if not os.path.exists(filename):
        print(f"[Sender {sender_id}] Failed to open message file.", file=sys.stderr)
        return 1
    _ready_marker(filename, sender_id).touch()

    lines = iter(sys.stdin)
    while True:
        print(f"[Sender {sender_id}] Enter command (send/exit): ", end="", flush=True)
        line = next(lines, None)
        if line is None:
            break
        command = line.strip()
        if command == "send":
            print("Enter message: ", end="", flush=True)
            text = next(lines, "").rstrip("\r\n")
            if not write_message(filename, slots, text):
                print(f"[Sender {sender_id}] No free slot. Message not sent.")
        elif command == "exit":
            break
    return 0


def _dispatch(argv: list[str]) -> int:
    if argv and argv[0] == "sender":
        return sender_main(argv[1:])
    if argv and argv[0] == "receiver":
        return receiver_main(argv[1:])
    return receiver_main(argv)


if __name__ == "__main__":
    raise SystemExit(_dispatch(sys.argv[1:]))