from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Any

from ..core.enums import FeeStatus


@dataclass(frozen=True)
class Fee:
    """Domain entity: a fee owed by a student."""

    id: str
    student_id: str
    amount: int
    status: FeeStatus
    due_date: date

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "student_id": self.student_id,
            "amount": self.amount,
            "status": self.status.value,
            "due_date": self.due_date.isoformat(),
        }


@dataclass(frozen=True)
class FeeRow:
    """Read-model for the fees table (fee joined with student name)."""

    fee: Fee
    student_name: str

    def to_dict(self) -> dict[str, Any]:
        out = self.fee.to_dict()
        out["student_name"] = self.student_name
        return out
