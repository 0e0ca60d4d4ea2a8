from __future__ import annotations

import threading
from datetime import date

import pytest

from hostel_system.container import build_container


@pytest.fixture
def slow_container(monkeypatch):
    container = build_container(latency_ms=50, today=date(2026, 1, 15))
    store = container.store
    sleeps = []

    def fake_sleep(seconds):
        # Check from another thread whether the store lock is free during the sleep.
        def check():
            acquired = store._lock.acquire(blocking=False)
            if acquired:
                store._lock.release()
            sleeps.append(acquired)

        t = threading.Thread(target=check)
        t.start()
        t.join()

    monkeypatch.setattr("hostel_system.store.memory_store.time.sleep", fake_sleep)
    return container, sleeps


def test_allocation_sleeps_once_without_holding_lock(slow_container):
    container, sleeps = slow_container

    result = container.room_service.allocate("S005", "R201")

    assert result.success
    assert sleeps == [True]


def test_plain_read_sleeps_before_locking(slow_container):
    container, sleeps = slow_container

    assert len(container.fees_repo.list_all()) == 5
    assert sleeps == [True]


def test_nested_atomic_sections_do_not_sleep_again(slow_container):
    container, sleeps = slow_container

    with container.store.atomic():
        container.students_repo.get_by_id("S001")
        container.rooms_repo.list_all()

    assert sleeps == [True]


def test_zero_latency_never_sleeps(monkeypatch):
    container = build_container(today=date(2026, 1, 15))
    calls = []
    monkeypatch.setattr("hostel_system.store.memory_store.time.sleep", calls.append)

    container.room_service.allocate("S005", "R201")

    assert calls == []
