from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_for_student_and_date(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(self, *, student_id: str, day: date, present: bool) -> AttendanceRecord:
        raise NotImplementedError

    def set_present(self, record_id: str, present: bool) -> Optional[AttendanceRecord]:
        raise NotImplementedError
