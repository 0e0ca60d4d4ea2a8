from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User roles used for route gating."""

    ADMIN = "admin"
    STUDENT = "student"


class FeeStatus(str, Enum):
    """Binary fee state, no intermediate states."""

    PAID = "Paid"
    DUE = "Due"


class SessionState(str, Enum):
    LOADING = "LOADING"
    ANONYMOUS = "ANONYMOUS"
    AUTHENTICATED = "AUTHENTICATED"
