from __future__ import annotations

import logging
from typing import Union

from ..core.constants import ADMIN_EMAIL, ADMIN_USER_ID
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from ..students.repository import StudentRepository
from .model import SessionUser

logger = logging.getLogger(__name__)


class AuthService:
    """Use case: resolve a role + email pair to a session identity.

    There is no credential check; admin always resolves to the fixed
    administrative identity.
    """

    def __init__(self, students: StudentRepository):
        self._students = students

    @staticmethod
    def admin_user() -> SessionUser:
        return SessionUser(id=ADMIN_USER_ID, email=ADMIN_EMAIL, role=Role.ADMIN)

    @staticmethod
    def student_user(student_id: str, email: str) -> SessionUser:
        return SessionUser(id=f"user-{student_id}", email=email, role=Role.STUDENT, student_id=student_id)

    def login(self, email: str, role: Union[str, Role]) -> SessionUser:
        try:
            role = Role(role)
        except ValueError:
            raise AuthenticationError("Unknown role") from None

        if role == Role.ADMIN:
            user = self.admin_user()
        else:
            student = self._students.get_by_email(email)
            if not student:
                logger.info("Login failed: no student with email %s", email)
                raise AuthenticationError("User not found")
            user = self.student_user(student.id, student.email)

        logger.info("Login %s as %s", user.email, user.role.value)
        return user
