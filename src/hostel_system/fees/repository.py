from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import FeeStatus
from .model import Fee


class FeeRepository(Protocol):
    def list_all(self) -> Sequence[Fee]:
        raise NotImplementedError

    def get_by_id(self, fee_id: str) -> Optional[Fee]:
        raise NotImplementedError

    def update_status(self, fee_id: str, status: FeeStatus) -> Optional[Fee]:
        raise NotImplementedError
