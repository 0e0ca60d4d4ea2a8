from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from .attendance.memory_attendance_repository import InMemoryAttendanceRepository
from .attendance.service import AttendanceService
from .dashboard.service import DashboardService
from .fees.memory_fee_repository import InMemoryFeeRepository
from .fees.service import FeeService
from .reports.service import ReportService
from .rooms.memory_room_repository import InMemoryRoomRepository
from .rooms.service import RoomAllocationService
from .store.memory_store import HostelStore
from .store.seed import seed_demo_data
from .students.memory_student_repository import InMemoryStudentRepository
from .students.service import StudentService
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    store: HostelStore

    students_repo: InMemoryStudentRepository
    rooms_repo: InMemoryRoomRepository
    fees_repo: InMemoryFeeRepository
    attendance_repo: InMemoryAttendanceRepository

    auth_service: AuthService
    student_service: StudentService
    room_service: RoomAllocationService
    fee_service: FeeService
    attendance_service: AttendanceService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(
    *,
    latency_ms: int = 0,
    seed: bool = True,
    today: Optional[date] = None,
    store: Optional[HostelStore] = None,
) -> Container:
    store = store or HostelStore(latency_seconds=latency_ms / 1000.0)
    if seed:
        seed_demo_data(store, today=today or date.today())

    students_repo = InMemoryStudentRepository(store)
    rooms_repo = InMemoryRoomRepository(store)
    fees_repo = InMemoryFeeRepository(store)
    attendance_repo = InMemoryAttendanceRepository(store)

    return Container(
        store=store,
        students_repo=students_repo,
        rooms_repo=rooms_repo,
        fees_repo=fees_repo,
        attendance_repo=attendance_repo,
        auth_service=AuthService(students_repo),
        student_service=StudentService(students_repo, rooms_repo, atomic=store.atomic),
        room_service=RoomAllocationService(rooms_repo, students_repo, atomic=store.atomic),
        fee_service=FeeService(fees_repo, students_repo),
        attendance_service=AttendanceService(attendance_repo, students_repo, atomic=store.atomic),
        report_service=ReportService(students_repo, rooms_repo, fees_repo),
        dashboard_service=DashboardService(students_repo, rooms_repo, fees_repo),
    )
