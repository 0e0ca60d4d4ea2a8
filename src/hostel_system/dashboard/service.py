from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from ..core.enums import FeeStatus
from ..fees.repository import FeeRepository
from ..rooms.repository import RoomRepository
from ..students.repository import StudentRepository


@dataclass(frozen=True)
class DashboardStats:
    total_students: int
    rooms_occupied: int
    total_rooms: int
    fees_collected: int
    total_fees: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "total_students": self.total_students,
            "rooms_occupied": self.rooms_occupied,
            "total_rooms": self.total_rooms,
            "fees_collected": self.fees_collected,
            "total_fees": self.total_fees,
            "charts": {
                "room_occupancy": [
                    {"name": "Occupied", "value": self.rooms_occupied},
                    {"name": "Vacant", "value": self.total_rooms - self.rooms_occupied},
                ],
                "fees_status": [
                    {"name": "Fees", "Collected": self.fees_collected, "Due": self.total_fees - self.fees_collected},
                ],
            },
        }


class DashboardService:
    def __init__(self, students: StudentRepository, rooms: RoomRepository, fees: FeeRepository):
        self._students = students
        self._rooms = rooms
        self._fees = fees

    def get_stats(self) -> DashboardStats:
        students = self._students.list_all()
        rooms = self._rooms.list_all()
        fees = self._fees.list_all()

        return DashboardStats(
            total_students=len(students),
            rooms_occupied=sum(1 for r in rooms if r.occupants),
            total_rooms=len(rooms),
            fees_collected=sum(f.amount for f in fees if f.status == FeeStatus.PAID),
            total_fees=sum(f.amount for f in fees),
        )
