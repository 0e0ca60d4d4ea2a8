from __future__ import annotations

from dataclasses import dataclass
from functools import wraps

from flask import g, redirect, url_for

from ..core.enums import Role

ADMIN_ONLY = frozenset({Role.ADMIN})
ANY_ROLE = frozenset({Role.ADMIN, Role.STUDENT})


@dataclass(frozen=True)
class NavItem:
    endpoint: str
    path: str
    label: str
    roles: frozenset[Role]

    def to_dict(self) -> dict:
        return {"path": self.path, "label": self.label}


NAV_ITEMS = (
    NavItem("dashboard", "/dashboard", "Dashboard", ADMIN_ONLY),
    NavItem("students", "/students", "Students", ADMIN_ONLY),
    NavItem("rooms", "/rooms", "Rooms", ADMIN_ONLY),
    NavItem("fees", "/fees", "Fees", ADMIN_ONLY),
    NavItem("attendance", "/attendance", "Attendance", ADMIN_ONLY),
    NavItem("reports", "/reports", "Reports", ADMIN_ONLY),
    NavItem("personal_details", "/personal-details", "My Profile", ANY_ROLE),
)


def nav_for(role: Role) -> list[NavItem]:
    return [item for item in NAV_ITEMS if role in item.roles]


def roles_required(*roles: Role):
    """Gate a view by role.

    Anonymous users are sent to the login page; authenticated users whose
    role is not allowed are sent to their profile page.
    """

    allowed = frozenset(roles)

    def decorator(view):
        @wraps(view)
        def wrapper(*args, **kwargs):
            user = getattr(g, "current_user", None)
            if user is None:
                return redirect(url_for("login"))
            if user.role not in allowed:
                return redirect(url_for("personal_details"))
            return view(*args, **kwargs)

        return wrapper

    return decorator
