from __future__ import annotations

import threading
import time
from contextlib import contextmanager
from typing import Iterator

from ..attendance.model import AttendanceRecord
from ..fees.model import Fee
from ..rooms.model import Room
from ..students.model import Student


class HostelStore:
    """Single in-memory store shared by the repositories.

    Collections are keyed by id and keep insertion order. Records are frozen
    dataclasses, so anything handed out is a snapshot. One re-entrant lock
    guards all collections; multi-step mutations run inside ``atomic()``.

    Simulated latency is paid once per outermost ``atomic()`` entry, before
    the lock is taken, so the lock is never held through a sleep.
    """

    def __init__(self, *, latency_seconds: float = 0.0):
        self.students: dict[str, Student] = {}
        self.rooms: dict[str, Room] = {}
        self.fees: dict[str, Fee] = {}
        self.attendance: dict[str, AttendanceRecord] = {}

        self._lock = threading.RLock()
        self._local = threading.local()
        self._latency_seconds = max(float(latency_seconds), 0.0)
        self._counters = {"student": 0, "attendance": 0}

    @contextmanager
    def atomic(self) -> Iterator["HostelStore"]:
        depth = getattr(self._local, "depth", 0)
        if depth == 0:
            self.simulate_latency()

        with self._lock:
            self._local.depth = depth + 1
            try:
                yield self
            finally:
                self._local.depth = depth

    def simulate_latency(self) -> None:
        if self._latency_seconds:
            time.sleep(self._latency_seconds)

    def next_id(self, kind: str) -> int:
        with self._lock:
            self._counters[kind] += 1
            return self._counters[kind]

    def bump_counter(self, kind: str, value: int) -> None:
        """Make sure ``next_id`` never hands out ``value`` again."""
        with self._lock:
            self._counters[kind] = max(self._counters[kind], int(value))
