from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import Any

from ..students.model import Student


@dataclass(frozen=True)
class Room:
    """Domain entity: a room with an ordered occupant list of student ids."""

    id: str
    room_number: str
    capacity: int
    occupants: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if int(self.capacity) <= 0:
            raise ValueError("Room capacity must be a positive integer")

    @property
    def occupant_count(self) -> int:
        return len(self.occupants)

    @property
    def is_full(self) -> bool:
        return len(self.occupants) >= self.capacity

    def with_occupant(self, student_id: str) -> "Room":
        return replace(self, occupants=self.occupants + (student_id,))

    def without_occupant(self, student_id: str) -> "Room":
        return replace(self, occupants=tuple(o for o in self.occupants if o != student_id))

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "room_number": self.room_number,
            "capacity": self.capacity,
            "occupants": list(self.occupants),
        }


@dataclass(frozen=True)
class RoomCard:
    """Read-model for the allocation screen."""

    room: Room
    occupant_details: tuple[Student, ...]

    def to_dict(self) -> dict[str, Any]:
        out = self.room.to_dict()
        out["is_full"] = self.room.is_full
        out["occupant_count"] = self.room.occupant_count
        out["occupant_details"] = [{"id": s.id, "name": s.name} for s in self.occupant_details]
        return out


@dataclass(frozen=True)
class Allocation:
    room: Room
    student: Student
