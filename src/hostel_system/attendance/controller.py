from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.datetime_utils import parse_iso_date, parse_optional_date, today_local
from ..common.web import error_response, parse_bool, request_data
from ..container import Container
from ..core.constants import ALL_STUDENTS
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.access import roles_required
from .model import HistoryFilter


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="attendance")
    @roles_required(Role.ADMIN)
    def daily_attendance():
        try:
            day = parse_optional_date(request.args.get("date")) or today_local()
        except ValidationError as e:
            return error_response(str(e))

        rows = service.daily_sheet(day)
        return jsonify({"success": True, "date": day.isoformat(), "rows": [r.to_dict() for r in rows]})

    @app.route("/attendance", methods=["POST"], endpoint="save_attendance")
    @roles_required(Role.ADMIN)
    def save_attendance():
        data = request_data()
        try:
            day = parse_iso_date(str(data.get("date", "")))
        except ValidationError as e:
            return error_response(str(e))

        records = data.get("records")
        if not isinstance(records, list):
            return error_response("records must be a list")

        marks = {}
        for item in records:
            if not isinstance(item, dict) or not item.get("student_id"):
                return error_response("Each record needs a student_id")
            marks[str(item["student_id"])] = parse_bool(item.get("present", False))

        results = service.save_daily(day, marks)
        failed = [r.message for r in results if not r.success]
        if failed:
            return jsonify({"success": False, "message": "; ".join(sorted(set(failed)))}), 400

        return jsonify(
            {
                "success": True,
                "message": "Attendance saved successfully!",
                "records": [r.data.to_dict() for r in results],
            }
        )

    @app.route("/attendance/history", methods=["GET"], endpoint="attendance_history")
    @roles_required(Role.ADMIN)
    def attendance_history():
        end_arg = request.args.get("end_date")
        try:
            filters = HistoryFilter(
                student_id=request.args.get("student_id") or ALL_STUDENTS,
                start_date=parse_optional_date(request.args.get("start_date")),
                # Missing end bound defaults to today; an explicit empty value means none.
                end_date=today_local() if end_arg is None else parse_optional_date(end_arg),
            )
        except ValidationError as e:
            return error_response(str(e))

        rows = service.history(filters)
        return jsonify({"success": True, "records": [r.to_dict() for r in rows]})
