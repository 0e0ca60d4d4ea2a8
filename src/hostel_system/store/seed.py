from __future__ import annotations

from datetime import date, timedelta

from ..attendance.model import AttendanceRecord
from ..core.enums import FeeStatus
from ..fees.model import Fee
from ..rooms.model import Room
from ..students.model import Student
from .memory_store import HostelStore


def _student(sid: str, name: str, email: str, phone: str, address: str, course: str, room_id):
    seed = name.split()[0].lower()
    return Student(
        id=sid,
        name=name,
        email=email,
        phone=phone,
        address=address,
        course=course,
        profile_picture_url=f"https://picsum.photos/seed/{seed}/200",
        room_id=room_id,
    )


def seed_demo_data(store: HostelStore, *, today: date) -> None:
    """Load the demo roster. Attendance dates are relative to ``today``."""

    students = [
        _student("S001", "Alice Johnson", "alice@example.com", "123-456-7890", "123 Maple St", "Computer Science", "R101"),
        _student("S002", "Bob Smith", "bob@example.com", "234-567-8901", "456 Oak Ave", "Mechanical Engineering", "R101"),
        _student("S003", "Charlie Brown", "charlie@example.com", "345-678-9012", "789 Pine Ln", "Physics", "R102"),
        _student("S004", "Diana Prince", "diana@example.com", "456-789-0123", "101 Star Blvd", "History", "R103"),
        _student("S005", "Ethan Hunt", "ethan@example.com", "567-890-1234", "202 Mission Rd", "Kinesiology", None),
    ]
    rooms = [
        Room(id="R101", room_number="101", capacity=2, occupants=("S001", "S002")),
        Room(id="R102", room_number="102", capacity=2, occupants=("S003",)),
        Room(id="R103", room_number="103", capacity=2, occupants=("S004",)),
        Room(id="R201", room_number="201", capacity=2),
        Room(id="R202", room_number="202", capacity=2),
    ]
    due = date(2024, 8, 1)
    fees = [
        Fee(id="F01", student_id="S001", amount=5000, status=FeeStatus.PAID, due_date=due),
        Fee(id="F02", student_id="S002", amount=5000, status=FeeStatus.DUE, due_date=due),
        Fee(id="F03", student_id="S003", amount=5000, status=FeeStatus.PAID, due_date=due),
        Fee(id="F04", student_id="S004", amount=5000, status=FeeStatus.DUE, due_date=due),
        Fee(id="F05", student_id="S005", amount=5000, status=FeeStatus.DUE, due_date=due),
    ]
    yesterday = today - timedelta(days=1)
    day_before = today - timedelta(days=2)
    marks = [
        ("S001", today, True),
        ("S002", today, False),
        ("S003", today, True),
        ("S001", yesterday, True),
        ("S002", yesterday, True),
        ("S003", yesterday, False),
        ("S001", day_before, False),
        ("S002", day_before, True),
    ]

    with store.atomic():
        for s in students:
            store.students[s.id] = s
        for r in rooms:
            store.rooms[r.id] = r
        for f in fees:
            store.fees[f.id] = f
        for i, (student_id, day, present) in enumerate(marks, start=1):
            rec = AttendanceRecord(id=f"A{i:02d}", student_id=student_id, date=day, present=present)
            store.attendance[rec.id] = rec

        store.bump_counter("student", len(students))
        store.bump_counter("attendance", len(marks))
