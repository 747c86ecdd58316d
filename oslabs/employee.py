"""Fixed-size employee records stored in a binary file.

A record is a little-endian 32-bit number, a 10-byte NUL-padded name, two
bytes of padding and a 64-bit float of hours: 24 bytes in all.
"""

from __future__ import annotations

import os
import struct
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import BinaryIO, Union

NAME_SIZE = 10
_RECORD = struct.Struct("<i10s2xd")
RECORD_SIZE = _RECORD.size

PathLike = Union[str, "os.PathLike[str]"]


@dataclass
class Employee:
    """One employee record."""

    num: int
    name: str
    hours: float


def pack_employee(employee: Employee) -> bytes:
    """Encode ``employee`` as one record."""
    name = employee.name.encode("utf-8")
    if len(name) >= NAME_SIZE:
        raise ValueError(f"employee name must be shorter than {NAME_SIZE} bytes")
    return _RECORD.pack(employee.num, name, employee.hours)


def unpack_employee(data: bytes) -> Employee:
    """Decode one record."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"an employee record is {RECORD_SIZE} bytes, got {len(data)}")
    num, name, hours = _RECORD.unpack(data)
    return Employee(num, name.split(b"\0", 1)[0].decode("utf-8", errors="replace"), hours)


def write_employees(path: PathLike, employees: Iterable[Employee]) -> None:
    """Write ``employees`` to ``path``, replacing its contents."""
    with open(path, "wb") as file:
        for employee in employees:
            file.write(pack_employee(employee))


def _records(file: BinaryIO) -> Iterator[Employee]:
    while len(data := file.read(RECORD_SIZE)) == RECORD_SIZE:
        yield unpack_employee(data)


def find_employee(path: PathLike, num: int) -> Employee | None:
    """Return the first employee numbered ``num``, or None."""
    with open(path, "rb") as file:
        return next((e for e in _records(file) if e.num == num), None)


def update_employee(path: PathLike, employee: Employee) -> bool:
    """Overwrite the record with the same number; False if there is none."""
    record = pack_employee(employee)
    with open(path, "r+b") as file:
        for current in _records(file):
            if current.num == employee.num:
                file.seek(-RECORD_SIZE, os.SEEK_CUR)
                file.write(record)
                return True
    return False