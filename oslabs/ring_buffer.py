"""A file-backed ring buffer of short fixed-size messages.

The file starts with a header of four unsigned 64-bit little-endian fields
(head, tail, count, capacity) followed by ``capacity`` slots of
``MESSAGE_SIZE`` NUL-padded bytes.
"""

from __future__ import annotations

import os
import struct
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Union

from filelock import FileLock

MESSAGE_SIZE = 20
_HEADER = struct.Struct("<4Q")

PathLike = Union[str, "os.PathLike[str]"]


class RingBufferError(Exception):
    """Raised when the buffer file cannot be used."""


class BufferFull(RingBufferError):
    """Raised when writing to a full buffer."""


class BufferEmpty(RingBufferError):
    """Raised when reading from an empty buffer."""


@dataclass
class _Header:
    head: int
    tail: int
    count: int
    capacity: int

    def pack(self) -> bytes:
        return _HEADER.pack(self.head, self.tail, self.count, self.capacity)


class RingBuffer:
    """A FIFO queue of messages shared through a file."""

    def __init__(self, filename: PathLike, capacity: int = 0) -> None:
        """Create a new buffer file when ``capacity`` is positive, otherwise
        open the existing one."""
        if capacity < 0:
            raise ValueError("capacity must not be negative")
        self.filename = os.fspath(filename)
        self._lock = threading.Lock()
        self._file_lock = FileLock(f"{self.filename}.lock")
        with self._locked():
            if capacity > 0:
                header = _Header(0, 0, 0, capacity)
                try:
                    with open(self.filename, "wb") as file:
                        file.write(header.pack() + bytes(MESSAGE_SIZE * capacity))
                except OSError as exc:
                    raise RingBufferError("Cannot create file") from exc
            else:
                self._load_header()

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._lock, self._file_lock:
            yield

    def _load_header(self) -> _Header:
        try:
            with open(self.filename, "rb") as file:
                data = file.read(_HEADER.size)
        except OSError as exc:
            raise RingBufferError("Cannot open file") from exc
        if len(data) < _HEADER.size:
            raise RingBufferError("Corrupt header")
        return _Header(*_HEADER.unpack(data))

    def _save_header(self, header: _Header) -> None:
        try:
            with open(self.filename, "r+b") as file:
                file.write(header.pack())
        except OSError as exc:
            raise RingBufferError("Cannot open file") from exc

    def _write_slot(self, index: int, message: str) -> None:
        data = message.encode("utf-8")[: MESSAGE_SIZE - 1].ljust(MESSAGE_SIZE, b"\0")
        try:
            with open(self.filename, "r+b") as file:
                file.seek(_HEADER.size + index * MESSAGE_SIZE)
                file.write(data)
        except OSError as exc:
            raise RingBufferError("Cannot open file") from exc

    def _read_slot(self, index: int) -> str:
        try:
            with open(self.filename, "rb") as file:
                file.seek(_HEADER.size + index * MESSAGE_SIZE)
                data = file.read(MESSAGE_SIZE)
        except OSError as exc:
            raise RingBufferError("Cannot open file") from exc
        return data.split(b"\0", 1)[0].decode("utf-8", errors="replace")

    def write_message(self, message: str) -> None:
        """Append ``message``, cut to ``MESSAGE_SIZE - 1`` bytes."""
        with self._locked():
            header = self._load_header()
            if header.count == header.capacity:
                raise BufferFull("Buffer full")
            self._write_slot(header.tail, message)
            header.tail = (header.tail + 1) % header.capacity
            header.count += 1
            self._save_header(header)

    def read_message(self) -> str:
        """Remove and return the oldest message."""
        with self._locked():
            header = self._load_header()
            if header.count == 0:
                raise BufferEmpty("Buffer empty")
            message = self._read_slot(header.head)
            header.head = (header.head + 1) % header.capacity
            header.count -= 1
            self._save_header(header)
            return message

    def is_full(self) -> bool:
        """Whether every slot holds a message."""
        with self._locked():
            header = self._load_header()
        return header.count == header.capacity

    def is_empty(self) -> bool:
        """Whether the buffer holds no message."""
        with self._locked():
            header = self._load_header()
        return header.count == 0