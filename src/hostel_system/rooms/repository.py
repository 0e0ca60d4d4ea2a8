from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Room


class RoomRepository(Protocol):
    def list_all(self) -> Sequence[Room]:
        raise NotImplementedError

    def get_by_id(self, room_id: str) -> Optional[Room]:
        raise NotImplementedError

    def save(self, room: Room) -> Room:
        """Replace the stored room with ``room`` (matched by id)."""

        raise NotImplementedError
