# oslabs

Small console programs and library modules around classic
operating-systems topics: cooperating threads, thread synchronisation,
inter-process messaging through a shared binary file, and fixed-size binary
records.

## Installation

```
pip install .
```

For the tests:

```
pip install .[test]
pytest
```

## Array statistics with two worker threads

```
oslabs-array-stats
```

Asks for an array size (asked again until it is positive) and the elements.
One thread finds the minimum and maximum, another computes the average, each
pausing briefly per element. The program prints `Min: ..., Max: ...` and
`Average: ...`, then replaces every element equal to the minimum or the
maximum with the average truncated toward zero and prints the modified array.

The functions are in `oslabs.array_stats`:

```python
from oslabs.array_stats import min_max, average, replace_extremes

min_max([1, 2, 3, 4, 5])            # (1, 5)
average([1, 2, 3, 4, 5])            # 3.0
replace_extremes([1, 2, 3, 4, 5])   # [3, 2, 3, 4, 3]
```

`min_max` and `average` raise `ValueError` on an empty sequence.

## Marker threads

```
oslabs-markers [size] [markers]
```

The array size and the number of marker threads may be given as arguments;
any that is missing is asked for on standard input. Each marker writes its
number into free cells of a shared array at positions drawn from a random
generator seeded with its number. When it picks an occupied cell it prints
`[Marker N] can't mark index I, marked: K` and waits. Once every active marker
is waiting, the array is printed and you enter the number of a marker to
terminate (invalid or already terminated numbers are reported and asked
again). The chosen marker clears all the cells it marked, the array is printed
again and the remaining markers resume. This repeats until no markers are
left.

Building blocks in `oslabs.marker`:

- `MarkerBoard(size)` – the shared array (`cells`), its `lock`, a
  `console_lock` for output, and `snapshot()` for a locked copy.
- `Marker(marker_id, board, start_event, output=None)` – a thread that starts
  marking once `start_event` is set. `wait_blocked(timeout)` waits until it is
  paused on an occupied cell, `resume()` lets it continue, `terminate()` makes
  it clear its cells and stop; `finished` tells whether it has done so.

`oslabs.marker_cli.run_session(size, marker_count, choose, output=None)` runs a
whole session without a console: `choose` is called with the current array
and returns the marker number to terminate. It returns the marker numbers in
the order they were terminated.

## Message slots in a shared file

```
oslabs-msg-receiver
oslabs-msg-sender <file> <id> <slots>
```

The receiver asks for a file name, a number of message slots and a number of
sender processes (at most 10). It creates the file with every slot empty,
starts the senders as child processes and waits until each has signalled that
it is ready. It then accepts `read`, which takes the next message scanning the
slots circularly from where the previous read stopped (or prints
`No new messages.`), and `exit`, which stops the senders.

A sender accepts `send`, followed by a line of text placed into the first free
slot (it reports when no slot is free), and `exit`. Text longer than 255 bytes
is cut.

Access to the file is serialised with a lock file named `<file>.lock`;
readiness is signalled with marker files named `<file>.readyN`, removed when
the receiver finishes. On Windows each sender gets its own console; elsewhere
the senders share the receiver's terminal.

The file format is handled by `oslabs.message_file`: the `Message` record
(`text`, `is_empty`), `pack_message`, `unpack_message`,
`create_message_file(path, slots)`, `write_message(path, slots, text)`
(returns `False` when no slot is free) and `read_message(path, slots, head)`
(returns the text or `None`, and the new head).

## Ring buffer in a shared file

```
oslabs-ring-receiver
oslabs-ring-sender <file>
```

The receiver asks for a file name, a capacity and a number of sender
processes, creates the buffer and starts the senders. `read` prints the oldest
message or `Waiting for messages...`; `exit` ends it. A sender accepts `send`
with messages of at most 19 bytes, retrying every half second while the buffer
is full, and `exit`.

The buffer is `oslabs.ring_buffer.RingBuffer`:

```python
from oslabs.ring_buffer import RingBuffer

ring = RingBuffer("queue.bin", 3)   # creates the file
ring.write_message("msg1")
ring.read_message()                 # "msg1"
ring.is_empty()                     # True

same = RingBuffer("queue.bin")      # opens the existing file
```

`write_message` cuts a message to 19 bytes. Writing to a full buffer raises
`BufferFull`, reading an empty one raises `BufferEmpty`; both derive from
`RingBufferError`, which is also raised when the file cannot be opened or
created.

## Employee records

`oslabs.employee` reads and writes fixed-size 24-byte `Employee` records
(number, name of at most 9 bytes, hours worked):

```python
from oslabs.employee import Employee, write_employees, find_employee, update_employee

write_employees("staff.bin", [Employee(1, "Anna", 12.5), Employee(2, "Ivan", 22.0)])
find_employee("staff.bin", 2)                        # Employee(num=2, name='Ivan', hours=22.0)
update_employee("staff.bin", Employee(2, "Olga", 88.8))   # True
find_employee("staff.bin", 99)                       # None
```

`pack_employee` and `unpack_employee` convert single records; a name that is
too long raises `ValueError`.

## What is not included

The employee support is limited to the record file functions above. There is
no server or client program for looking up or editing employee records over a
connection.