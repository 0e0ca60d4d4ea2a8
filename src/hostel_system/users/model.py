from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.enums import Role


@dataclass(frozen=True)
class SessionUser:
    """What we store into the session after login."""

    id: str
    email: str
    role: Role
    student_id: Optional[str] = None

    def to_record(self) -> dict[str, Any]:
        record: dict[str, Any] = {"id": self.id, "email": self.email, "role": self.role.value}
        if self.student_id:
            record["studentId"] = self.student_id
        return record

    @classmethod
    def from_record(cls, record: Any) -> "SessionUser":
        """Raises ValueError/KeyError/TypeError on malformed records."""
        if not isinstance(record, dict):
            raise TypeError("Session record must be a mapping")
        role = Role(record["role"])
        student_id = record.get("studentId")
        if role == Role.STUDENT and not student_id:
            raise ValueError("Student session without studentId")
        return cls(
            id=str(record["id"]),
            email=str(record["email"]),
            role=role,
            student_id=str(student_id) if student_id else None,
        )
