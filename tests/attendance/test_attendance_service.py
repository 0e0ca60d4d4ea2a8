from __future__ import annotations

from datetime import timedelta

from hostel_system.attendance.model import HistoryFilter


def _records_for(container, student_id, day):
    return [r for r in container.attendance_repo.list_all() if r.student_id == student_id and r.date == day]


def test_mark_twice_keeps_one_record_with_latest_value(container, fixed_today):
    svc = container.attendance_service

    first = svc.mark_attendance("S005", fixed_today, True)
    second = svc.mark_attendance("S005", fixed_today, False)

    records = _records_for(container, "S005", fixed_today)
    assert len(records) == 1
    assert records[0].present is False
    assert first.data.id == second.data.id


def test_mark_overwrites_seeded_record(container, fixed_today):
    container.attendance_service.mark_attendance("S002", fixed_today, True)

    records = _records_for(container, "S002", fixed_today)
    assert len(records) == 1
    assert records[0].id == "A02"
    assert records[0].present is True


def test_new_records_get_sequential_ids(container, fixed_today):
    result = container.attendance_service.mark_attendance("S004", fixed_today, True)

    assert result.success
    assert result.data.id == "A09"


def test_mark_unknown_student_fails(container, fixed_today):
    result = container.attendance_service.mark_attendance("S999", fixed_today, True)

    assert not result.success
    assert len(container.attendance_repo.list_all()) == 8


def test_daily_sheet_defaults_missing_records_to_absent(container, fixed_today):
    rows = {r.student_id: r for r in container.attendance_service.daily_sheet(fixed_today)}

    assert len(rows) == 5
    assert rows["S001"].present is True and rows["S001"].recorded
    assert rows["S002"].present is False and rows["S002"].recorded
    assert rows["S005"].present is False and not rows["S005"].recorded
    # display default is not persisted
    assert _records_for(container, "S005", fixed_today) == []


def test_save_daily_marks_every_student(container, fixed_today):
    day = fixed_today + timedelta(days=1)
    marks = {s.id: True for s in container.students_repo.list_all()}

    results = container.attendance_service.save_daily(day, marks)

    assert all(r.success for r in results)
    assert len(container.attendance_repo.list_for_date(day)) == 5


def test_history_without_bounds_returns_everything_sorted_desc(container, fixed_today):
    rows = container.attendance_service.history(HistoryFilter(end_date=fixed_today))

    assert len(rows) == 8
    dates = [r.record.date for r in rows]
    assert dates == sorted(dates, reverse=True)


def test_history_equal_dates_keep_store_order(container, fixed_today):
    rows = container.attendance_service.history(HistoryFilter(start_date=fixed_today, end_date=fixed_today))

    assert [r.record.id for r in rows] == ["A01", "A02", "A03"]


def test_history_filters_by_student(container, fixed_today):
    rows = container.attendance_service.history(HistoryFilter(student_id="S001", end_date=fixed_today))

    assert [r.record.id for r in rows] == ["A01", "A04", "A07"]
    assert all(r.student_name == "Alice Johnson" for r in rows)


def test_history_bounds_are_inclusive(container, fixed_today):
    yesterday = fixed_today - timedelta(days=1)

    rows = container.attendance_service.history(HistoryFilter(start_date=yesterday, end_date=yesterday))

    assert {r.record.id for r in rows} == {"A04", "A05", "A06"}


def test_narrowing_range_never_grows_result(container, fixed_today):
    svc = container.attendance_service
    wide = {r.record.id for r in svc.history(HistoryFilter(end_date=fixed_today))}

    for days_back in range(4):
        start = fixed_today - timedelta(days=days_back)
        narrow = {r.record.id for r in svc.history(HistoryFilter(start_date=start, end_date=fixed_today))}
        assert narrow <= wide
        wide = narrow
