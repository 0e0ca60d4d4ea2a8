from __future__ import annotations

from dataclasses import dataclass

from ..common.csv_export import rows_to_csv
from ..common.datetime_utils import format_locale_date
from ..core.constants import (
    FEE_DUE_FILENAME,
    NOT_AVAILABLE,
    ROOM_OCCUPANCY_FILENAME,
    STUDENT_ROSTER_FILENAME,
    VACANT,
)
from ..core.enums import FeeStatus
from ..fees.repository import FeeRepository
from ..rooms.repository import RoomRepository
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class Report:
    filename: str
    fieldnames: tuple[str, ...]
    rows: list[dict]

    def to_csv(self) -> bytes:
        return rows_to_csv(self.fieldnames, self.rows)


class ReportService:
    """Pure projections over the joined collections, fully materialized."""

    def __init__(self, students: StudentRepository, rooms: RoomRepository, fees: FeeRepository):
        self._students = students
        self._rooms = rooms
        self._fees = fees

    def student_roster(self) -> Report:
        rows = [
            {
                "StudentID": s.id,
                "Name": s.name,
                "Email": s.email,
                "Phone": s.phone,
                "Course": s.course,
                "RoomID": s.room_id or NOT_AVAILABLE,
            }
            for s in self._students.list_all()
        ]
        return Report(
            filename=STUDENT_ROSTER_FILENAME,
            fieldnames=("StudentID", "Name", "Email", "Phone", "Course", "RoomID"),
            rows=rows,
        )

    def fee_due(self) -> Report:
        names = {s.id: s.name for s in self._students.list_all()}
        rows = [
            {
                "StudentID": f.student_id,
                "StudentName": names.get(f.student_id, NOT_AVAILABLE),
                "AmountDue": f.amount,
                "DueDate": format_locale_date(f.due_date),
            }
            for f in self._fees.list_all()
            if f.status == FeeStatus.DUE
        ]
        return Report(
            filename=FEE_DUE_FILENAME,
            fieldnames=("StudentID", "StudentName", "AmountDue", "DueDate"),
            rows=rows,
        )

    def room_occupancy(self) -> Report:
        names = {s.id: s.name for s in self._students.list_all()}
        rows = []
        for room in self._rooms.list_all():
            occupant_names = ", ".join(names[o] for o in room.occupants if o in names)
            rows.append(
                {
                    "RoomNumber": room.room_number,
                    "Capacity": room.capacity,
                    "OccupantsCount": room.occupant_count,
                    "Occupants": occupant_names or VACANT,
                }
            )
        return Report(
            filename=ROOM_OCCUPANCY_FILENAME,
            fieldnames=("RoomNumber", "Capacity", "OccupantsCount", "Occupants"),
            rows=rows,
        )

    def by_name(self, name: str) -> Report:
        builders = {
            "students": self.student_roster,
            "fees-due": self.fee_due,
            "room-occupancy": self.room_occupancy,
        }
        builder = builders.get(name)
        if not builder:
            raise KeyError(name)
        return builder()
