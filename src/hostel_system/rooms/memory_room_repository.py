from __future__ import annotations

from typing import Optional, Sequence

from ..store.memory_store import HostelStore
from .model import Room
from .repository import RoomRepository


class InMemoryRoomRepository(RoomRepository):
    def __init__(self, store: HostelStore):
        self._store = store

    def list_all(self) -> Sequence[Room]:
        with self._store.atomic():
            return list(self._store.rooms.values())

    def get_by_id(self, room_id: str) -> Optional[Room]:
        with self._store.atomic():
            return self._store.rooms.get(room_id)

    def save(self, room: Room) -> Room:
        with self._store.atomic():
            self._store.rooms[room.id] = room
            return room
