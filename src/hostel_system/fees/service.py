from __future__ import annotations

import logging
from typing import Sequence, Union

from ..core.constants import ALL_FEES, NOT_AVAILABLE
from ..core.enums import FeeStatus
from ..core.exceptions import ValidationError
from ..core.result import OperationResult
from ..students.repository import StudentRepository
from .model import Fee, FeeRow
from .repository import FeeRepository

logger = logging.getLogger(__name__)


def parse_fee_status(value: Union[str, FeeStatus]) -> FeeStatus:
    if isinstance(value, FeeStatus):
        return value
    try:
        return FeeStatus((value or "").strip().capitalize())
    except ValueError:
        raise ValidationError(f"Unknown fee status: {value!r}") from None


class FeeService:
    def __init__(self, fees: FeeRepository, students: StudentRepository):
        self._fees = fees
        self._students = students

    def list_fees(self, status: str = ALL_FEES) -> Sequence[FeeRow]:
        fees = self._fees.list_all()
        if status and status.strip().lower() != ALL_FEES.lower():
            wanted = parse_fee_status(status)
            fees = [f for f in fees if f.status == wanted]

        names = {s.id: s.name for s in self._students.list_all()}
        return [FeeRow(fee=f, student_name=names.get(f.student_id, NOT_AVAILABLE)) for f in fees]

    def update_status(self, fee_id: str, status: Union[str, FeeStatus]) -> OperationResult[Fee]:
        """Overwrite the status; any transition (including Paid -> Due) is allowed."""

        new_status = parse_fee_status(status)
        updated = self._fees.update_status(fee_id, new_status)
        if not updated:
            return OperationResult.fail("Fee not found.")

        logger.info("Fee %s marked %s", fee_id, new_status.value)
        return OperationResult.ok(updated)
