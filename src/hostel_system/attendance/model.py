from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any, Optional

from ..core.constants import ALL_STUDENTS


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: presence of one student on one day."""

    id: str
    student_id: str
    date: date
    present: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "date": self.date.isoformat(),
            "present": self.present,
        }


@dataclass(frozen=True)
class DailyAttendanceRow:
    """Read-model for the daily marking sheet.

    ``recorded`` is False when no record exists; ``present`` then shows the
    display default (absent).
    """

    student_id: str
    student_name: str
    present: bool
    recorded: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "student_id": self.student_id,
            "student_name": self.student_name,
            "present": self.present,
            "recorded": self.recorded,
        }


@dataclass(frozen=True)
class HistoryFilter:
    student_id: str = ALL_STUDENTS
    start_date: Optional[date] = None
    end_date: Optional[date] = None

    def matches(self, record: AttendanceRecord) -> bool:
        if self.student_id != ALL_STUDENTS and record.student_id != self.student_id:
            return False
        if self.start_date and record.date < self.start_date:
            return False
        if self.end_date and record.date > self.end_date:
            return False
        return True


@dataclass(frozen=True)
class HistoryRow:
    record: AttendanceRecord
    student_name: str

    def to_dict(self) -> dict[str, Any]:
        out = self.record.to_dict()
        out["student_name"] = self.student_name
        out["status"] = "Present" if self.record.present else "Absent"
        return out
