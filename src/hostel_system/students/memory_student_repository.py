from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..store.memory_store import HostelStore
from .model import Student
from .repository import StudentRepository


class InMemoryStudentRepository(StudentRepository):
    def __init__(self, store: HostelStore):
        self._store = store

    def list_all(self) -> Sequence[Student]:
        with self._store.atomic():
            return list(self._store.students.values())

    def get_by_id(self, student_id: str) -> Optional[Student]:
        with self._store.atomic():
            return self._store.students.get(student_id)

    def get_by_email(self, email: str) -> Optional[Student]:
        needle = (email or "").strip().lower()
        with self._store.atomic():
            for s in self._store.students.values():
                if s.email.lower() == needle:
                    return s
        return None

    def create(
        self,
        *,
        name: str,
        email: str,
        phone: str,
        address: str,
        course: str,
        profile_picture_url: str,
    ) -> Student:
        with self._store.atomic():
            student_id = f"S{self._store.next_id('student'):03d}"
            student = Student(
                id=student_id,
                name=name,
                email=email,
                phone=phone,
                address=address,
                course=course,
                profile_picture_url=profile_picture_url,
                room_id=None,
            )
            self._store.students[student_id] = student
            return student

    def update(self, student_id: str, **changes) -> Optional[Student]:
        with self._store.atomic():
            current = self._store.students.get(student_id)
            if not current:
                return None
            updated = replace(current, **changes)
            self._store.students[student_id] = updated
            return updated

    def set_room(self, student_id: str, room_id: Optional[str]) -> Optional[Student]:
        return self.update(student_id, room_id=room_id)

    def delete_by_id(self, student_id: str) -> bool:
        with self._store.atomic():
            return self._store.students.pop(student_id, None) is not None
