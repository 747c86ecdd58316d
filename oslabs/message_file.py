"""Fixed-size message slots stored in a binary file.

Each slot holds a NUL-padded text field of ``MAX_MSG_LEN`` bytes followed by
one byte that is non-zero while the slot is free. Writers fill the first free
slot. Readers scan circularly from a head position and free the first
occupied slot they meet.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Union

from filelock import FileLock

MAX_MSG_LEN = 256
RECORD_SIZE = MAX_MSG_LEN + 1

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Message:
    """One slot of the message file."""

    text: str = ""
    is_empty: bool = True


def fit_text(text: str) -> str:
    """Cut ``text`` so that its encoding fits a slot with its terminator."""
    data = text.encode("utf-8")[: MAX_MSG_LEN - 1]
    return data.decode("utf-8", errors="ignore")


def pack_message(message: Message) -> bytes:
    """Encode ``message`` as one slot record."""
    data = message.text.encode("utf-8")
    if len(data) >= MAX_MSG_LEN:
        raise ValueError(f"message text must be shorter than {MAX_MSG_LEN} bytes")
    return data.ljust(MAX_MSG_LEN, b"\0") + bytes([1 if message.is_empty else 0])


def unpack_message(data: bytes) -> Message:
    """Decode one slot record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"a message record is {RECORD_SIZE} bytes, got {len(data)}")
    text = data[:MAX_MSG_LEN].split(b"\0", 1)[0].decode("utf-8", errors="replace")
    return Message(text, data[MAX_MSG_LEN] != 0)


def lock_for(path: PathLike) -> FileLock:
    """Return the inter-process lock guarding the message file at ``path``."""
    return FileLock(f"{os.fspath(path)}.lock")


def create_message_file(path: PathLike, slots: int) -> None:
    """Create ``path`` holding ``slots`` empty messages."""
    if slots < 0:
        raise ValueError("number of slots must not be negative")
    with lock_for(path), open(path, "wb") as file:
        file.write(pack_message(Message()) * slots)


def write_message(path: PathLike, slots: int, text: str) -> bool:
    """Store ``text`` in the first free slot; return False when none is free."""
    record = pack_message(Message(fit_text(text), False))
    with lock_for(path), open(path, "r+b") as file:
        for pos in range(slots):
            file.seek(pos * RECORD_SIZE)
            data = file.read(RECORD_SIZE)
            if len(data) < RECORD_SIZE:
                break
            if unpack_message(data).is_empty:
                file.seek(pos * RECORD_SIZE)
                file.write(record)
                return True
    return False


def read_message(path: PathLike, slots: int, head: int) -> tuple[str | None, int]:
    """Take the first message found scanning circularly from ``head``.

    Returns the text and the new head, or ``None`` and the unchanged head
    when every slot is free.
    """
    with lock_for(path), open(path, "r+b") as file:
        for offset in range(slots):
            pos = (head + offset) % slots
            file.seek(pos * RECORD_SIZE)
            data = file.read(RECORD_SIZE)
            if len(data) < RECORD_SIZE:
                continue
            message = unpack_message(data)
            if not message.is_empty:
                file.seek(pos * RECORD_SIZE)
                file.write(pack_message(Message(message.text, True)))
                return message.text, (pos + 1) % slots
    return None, head