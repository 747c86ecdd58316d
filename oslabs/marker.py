"""Marker threads that claim cells of a shared array until they collide."""

from __future__ import annotations

import random
import sys
import threading
import time
from typing import TextIO

_MARK_DELAY = 0.005


class MarkerBoard:
    """A shared integer array with a lock for the cells and one for output."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("array size must be positive")
        self.cells = [0] * size
        self.lock = threading.Lock()
        self.console_lock = threading.Lock()

    def __len__(self) -> int:
        return len(self.cells)

    def snapshot(self) -> list[int]:
        """Return a copy of the cells taken under the lock."""
        with self.lock:
            return list(self.cells)


class Marker(threading.Thread):
    """A thread that writes its id into free cells chosen at random.

    When it picks a taken cell it reports, pauses and waits to be resumed or
    terminated. On termination it clears every cell it marked.
    """

    def __init__(
        self,
        marker_id: int,
        board: MarkerBoard,
        start_event: threading.Event,
        output: TextIO | None = None,
    ) -> None:
        if marker_id <= 0:
            raise ValueError("marker id must be positive")
        super().__init__(name=f"marker-{marker_id}", daemon=True)
        self.marker_id = marker_id
        self.board = board
        self.start_event = start_event
        self.output = output
        self.marked_indices: list[int] = []
        self._rng = random.Random(marker_id)
        self._state = threading.Condition()
        self._paused = False
        self._stopping = False
        self._blocked = threading.Event()
        self._finished = threading.Event()

    @property
    def finished(self) -> bool:
        """Whether the marker has cleared its cells and stopped."""
        return self._finished.is_set()

    def run(self) -> None:
        self.start_event.wait()
        while not self._stopping:
            marked = 0
            while not self._stopping:
                index = self._rng.randrange(len(self.board))
                if self._try_mark(index):
                    marked += 1
                    time.sleep(_MARK_DELAY)
                else:
                    self._report(index, marked)
                    self._pause()
                    break
        self._clear_marks()

    def wait_blocked(self, timeout: float | None = None) -> bool:
        """Wait until the marker is paused on a taken cell; False on timeout."""
        return self._blocked.wait(timeout)

    def resume(self) -> None:
        """Let a paused marker continue marking."""
        with self._state:
            if self._paused:
                self._paused = False
                self._blocked.clear()
                self._state.notify_all()

    def terminate(self) -> None:
        """Ask the marker to clear its cells and stop."""
        with self._state:
            self._stopping = True
            self._state.notify_all()

    def _try_mark(self, index: int) -> bool:
        with self.board.lock:
            if self.board.cells[index] != 0:
                return False
            time.sleep(_MARK_DELAY)
            self.board.cells[index] = self.marker_id
            self.marked_indices.append(index)
            return True

    def _report(self, index: int, marked: int) -> None:
        out = self.output if self.output is not None else sys.stdout
        with self.board.console_lock:
            print(
                f"[Marker {self.marker_id}] can't mark index {index}, marked: {marked}",
                file=out,
                flush=True,
            )

    def _pause(self) -> None:
        with self._state:
            self._paused = True
            self._blocked.set()
            self._state.wait_for(lambda: self._stopping or not self._paused)

    def _clear_marks(self) -> None:
        with self.board.lock:
            for index in self.marked_indices:
                self.board.cells[index] = 0
        self._finished.set()