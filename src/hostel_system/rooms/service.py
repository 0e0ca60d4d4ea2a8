from __future__ import annotations

import logging
from contextlib import nullcontext
from typing import Callable, ContextManager, Optional, Sequence

from ..core.result import OperationResult
from ..students.model import Student
from ..students.repository import StudentRepository
from .model import Allocation, Room, RoomCard
from .repository import RoomRepository

logger = logging.getLogger(__name__)


class RoomAllocationService:
    """Use case: move students between rooms.

    Invariants kept by every operation here:
    - ``len(room.occupants) <= room.capacity`` for every room;
    - a student id appears in at most one room's occupant list;
    - ``student.room_id`` names the room listing the student, or is None.

    Each operation runs as one critical section through ``atomic``.
    """

    def __init__(
        self,
        rooms: RoomRepository,
        students: StudentRepository,
        *,
        atomic: Optional[Callable[[], ContextManager]] = None,
    ):
        self._rooms = rooms
        self._students = students
        self._atomic = atomic or nullcontext

    def list_rooms(self) -> Sequence[RoomCard]:
        by_id = {s.id: s for s in self._students.list_all()}
        cards = []
        for room in self._rooms.list_all():
            details = tuple(by_id[o] for o in room.occupants if o in by_id)
            cards.append(RoomCard(room=room, occupant_details=details))
        return cards

    def list_unallocated_students(self) -> Sequence[Student]:
        return [s for s in self._students.list_all() if not s.room_id]

    def allocate(self, student_id: str, room_id: str) -> OperationResult[Allocation]:
        with self._atomic():
            room = self._rooms.get_by_id(room_id)
            if not room or room.is_full:
                logger.info("Allocation of %s to %s refused: room full or missing", student_id, room_id)
                return OperationResult.fail("Room is full or does not exist.")

            if not self._students.get_by_id(student_id):
                return OperationResult.fail("Student not found.")

            # Scan every room, not just student.room_id, so stale references heal.
            self._remove_from_all_rooms(student_id)

            target = self._rooms.get_by_id(room_id)
            target = self._rooms.save(target.with_occupant(student_id))
            student = self._students.set_room(student_id, room_id)

        logger.info("Student %s allocated to room %s", student_id, room_id)
        return OperationResult.ok(Allocation(room=target, student=student))

    def deallocate(self, student_id: str) -> OperationResult[Student]:
        with self._atomic():
            student = self._students.get_by_id(student_id)
            if not student or not student.room_id:
                return OperationResult.fail("Student not in a room.")

            self._remove_from_all_rooms(student_id)
            student = self._students.set_room(student_id, None)

        logger.info("Student %s deallocated", student_id)
        return OperationResult.ok(student)

    def _remove_from_all_rooms(self, student_id: str) -> list[Room]:
        changed = []
        for room in self._rooms.list_all():
            if student_id in room.occupants:
                changed.append(self._rooms.save(room.without_occupant(student_id)))
        return changed
