from __future__ import annotations

import pytest

from hostel_system.core.enums import Role
from hostel_system.core.exceptions import AuthenticationError


def test_student_login_resolves_to_student_identity(container):
    user = container.auth_service.login("alice@example.com", "student")

    assert user.role == Role.STUDENT
    assert user.student_id == "S001"
    assert user.to_record() == {
        "id": "user-S001",
        "email": "alice@example.com",
        "role": "student",
        "studentId": "S001",
    }


def test_student_login_matches_email_case_insensitively(container):
    user = container.auth_service.login("ALICE@Example.COM", Role.STUDENT)

    assert user.student_id == "S001"


def test_unknown_student_email_raises(container):
    with pytest.raises(AuthenticationError, match="User not found"):
        container.auth_service.login("nobody@example.com", "student")


def test_admin_login_uses_fixed_identity(container):
    user = container.auth_service.login("whoever@example.com", "admin")

    assert user.to_record() == {"id": "admin01", "email": "admin@hms.com", "role": "admin"}


def test_unknown_role_raises(container):
    with pytest.raises(AuthenticationError):
        container.auth_service.login("alice@example.com", "warden")
