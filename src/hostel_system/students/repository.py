from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Note (DIP): the service layer depends on this interface, not on a
    concrete store.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: str) -> Optional[Student]:
        raise NotImplementedError

    def get_by_email(self, email: str) -> Optional[Student]:
        raise NotImplementedError

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
        raise NotImplementedError

    def update(self, student_id: str, **changes) -> Optional[Student]:
        raise NotImplementedError

    def set_room(self, student_id: str, room_id: Optional[str]) -> Optional[Student]:
        raise NotImplementedError

    def delete_by_id(self, student_id: str) -> bool:
        raise NotImplementedError
