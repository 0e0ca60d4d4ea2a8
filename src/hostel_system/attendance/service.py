from __future__ import annotations

from contextlib import nullcontext
from datetime import date
from typing import Callable, ContextManager, Mapping, Optional, Sequence

from ..core.constants import NOT_AVAILABLE
from ..core.result import OperationResult
from ..students.repository import StudentRepository
from .model import AttendanceRecord, DailyAttendanceRow, HistoryFilter, HistoryRow
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        students: StudentRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._attendance = attendance
        self._students = students
        self._atomic = atomic or nullcontext

    def mark_attendance(self, student_id: str, day: date, present: bool) -> OperationResult[AttendanceRecord]:
        """Upsert by (student_id, day): overwrite an existing flag or append a record."""

        with self._atomic():
            if not self._students.get_by_id(student_id):
                return OperationResult.fail("Student not found.")

            existing = self._attendance.get_for_student_and_date(student_id, day)
            if existing:
                record = self._attendance.set_present(existing.id, present)
            else:
                record = self._attendance.create(student_id=student_id, day=day, present=present)

        return OperationResult.ok(record)

    def save_daily(self, day: date, marks: Mapping[str, bool]) -> list[OperationResult[AttendanceRecord]]:
        return [self.mark_attendance(student_id, day, present) for student_id, present in marks.items()]

    def daily_sheet(self, day: date) -> Sequence[DailyAttendanceRow]:
        students = self._students.list_all()
        by_student = {r.student_id: r for r in self._attendance.list_for_date(day)}

        rows = []
        for s in students:
            record = by_student.get(s.id)
            rows.append(
                DailyAttendanceRow(
                    student_id=s.id,
                    student_name=s.name,
                    present=record.present if record else False,
                    recorded=record is not None,
                )
            )
        return rows

    def history(self, filters: HistoryFilter) -> Sequence[HistoryRow]:
        records = [r for r in self._attendance.list_all() if filters.matches(r)]
        # sorted() is stable, so equal dates keep store order.
        records = sorted(records, key=lambda r: r.date, reverse=True)

        names = {s.id: s.name for s in self._students.list_all()}
        return [HistoryRow(record=r, student_name=names.get(r.student_id, NOT_AVAILABLE)) for r in records]
