from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


EDITABLE_FIELDS = ("name", "email", "phone", "address", "course")


@dataclass(frozen=True)
class Student:
    """Domain entity: a hostel resident.

    Plain data object; ``room_id`` is kept in sync with the rooms' occupant
    lists by the allocation service only.
    """

    id: str
    name: str
    email: str
    phone: str
    address: str
    course: str
    profile_picture_url: str
    room_id: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "email": self.email,
            "phone": self.phone,
            "address": self.address,
            "course": self.course,
            "profile_picture_url": self.profile_picture_url,
            "room_id": self.room_id,
        }
