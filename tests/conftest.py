from __future__ import annotations

from datetime import date

import pytest

from hostel_system.container import build_container
from hostel_system.main import create_app


@pytest.fixture
def fixed_today() -> date:
    return date(2026, 1, 15)


@pytest.fixture
def container(fixed_today):
    return build_container(today=fixed_today)


@pytest.fixture
def app():
    app = create_app("hostel_system.config.testing")
    return app


@pytest.fixture
def client(app):
    return app.test_client()


def _login(client, email: str, role: str):
    resp = client.post("/login", json={"email": email, "role": role})
    assert resp.status_code == 200, resp.get_json()
    return client


@pytest.fixture
def admin_client(client):
    return _login(client, "admin@hms.com", "admin")


@pytest.fixture
def student_client(client):
    return _login(client, "alice@example.com", "student")
