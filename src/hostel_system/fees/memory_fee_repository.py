from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..core.enums import FeeStatus
from ..store.memory_store import HostelStore
from .model import Fee
from .repository import FeeRepository


class InMemoryFeeRepository(FeeRepository):
    def __init__(self, store: HostelStore):
        self._store = store

    def list_all(self) -> Sequence[Fee]:
        with self._store.atomic():
            return list(self._store.fees.values())

    def get_by_id(self, fee_id: str) -> Optional[Fee]:
        with self._store.atomic():
            return self._store.fees.get(fee_id)

    def update_status(self, fee_id: str, status: FeeStatus) -> Optional[Fee]:
        with self._store.atomic():
            fee = self._store.fees.get(fee_id)
            if not fee:
                return None
            updated = replace(fee, status=status)
            self._store.fees[fee_id] = updated
            return updated
