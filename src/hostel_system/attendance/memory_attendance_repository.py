from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional, Sequence

from ..store.memory_store import HostelStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


class InMemoryAttendanceRepository(AttendanceRepository):
    def __init__(self, store: HostelStore):
        self._store = store

    def list_all(self) -> Sequence[AttendanceRecord]:
        with self._store.atomic():
            return list(self._store.attendance.values())

    def list_for_date(self, day: date) -> Sequence[AttendanceRecord]:
        with self._store.atomic():
            return [r for r in self._store.attendance.values() if r.date == day]

    def get_for_student_and_date(self, student_id: str, day: date) -> Optional[AttendanceRecord]:
        with self._store.atomic():
            for r in self._store.attendance.values():
                if r.student_id == student_id and r.date == day:
                    return r
        return None

    def create(self, *, student_id: str, day: date, present: bool) -> AttendanceRecord:
        with self._store.atomic():
            record = AttendanceRecord(
                id=f"A{self._store.next_id('attendance'):02d}",
                student_id=student_id,
                date=day,
                present=bool(present),
            )
            self._store.attendance[record.id] = record
            return record

    def set_present(self, record_id: str, present: bool) -> Optional[AttendanceRecord]:
        with self._store.atomic():
            record = self._store.attendance.get(record_id)
            if not record:
                return None
            updated = replace(record, present=bool(present))
            self._store.attendance[record_id] = updated
            return updated
