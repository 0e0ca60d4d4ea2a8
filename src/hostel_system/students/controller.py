from __future__ import annotations

from typing import Optional

from flask import Flask, g, jsonify, request
from werkzeug.utils import secure_filename

from ..common.web import error_response, request_data, result_response
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.access import ANY_ROLE, roles_required
from .model import EDITABLE_FIELDS

ALLOWED_EXTENSIONS = {"jpg", "jpeg", "png"}


def _text(value) -> str:
    """JSON null counts as a missing field."""
    return "" if value is None else str(value)


def allowed_file(filename: str) -> bool:
    return "." in filename and filename.rsplit(".", 1)[1].lower() in ALLOWED_EXTENSIONS


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/students", methods=["GET"], endpoint="students")
    @roles_required(Role.ADMIN)
    def list_students():
        students = service.list_students(request.args.get("q", ""))
        return jsonify({"success": True, "students": [s.to_dict() for s in students]})

    @app.route("/students", methods=["POST"], endpoint="create_student")
    @roles_required(Role.ADMIN)
    def create_student():
        data = request_data()
        try:
            student = service.create_student(**{f: _text(data.get(f)) for f in EDITABLE_FIELDS})
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"success": True, "data": student.to_dict()}), 201

    @app.route("/students/<student_id>", methods=["PUT", "PATCH"], endpoint="update_student")
    @roles_required(Role.ADMIN)
    def update_student(student_id: str):
        data = request_data()
        changes = {k: _text(v) for k, v in data.items() if k in EDITABLE_FIELDS}
        try:
            result = service.update_student(student_id, **changes)
        except ValidationError as e:
            return error_response(str(e))
        return result_response(result, failure_status=404)

    @app.route("/students/<student_id>", methods=["DELETE"], endpoint="delete_student")
    @roles_required(Role.ADMIN)
    def delete_student(student_id: str):
        return result_response(service.delete_student(student_id), failure_status=404)

    def _profile(student_id: Optional[str]):
        student = service.get_student(student_id) if student_id else None
        if not student:
            return error_response("Student not found.", 404)
        return jsonify({"success": True, "student": student.to_dict()})

    def _upload(student_id: Optional[str]):
        if not student_id:
            return error_response("Student not found.", 404)

        file = request.files.get("picture")
        if not file or not file.filename:
            return error_response("No file selected")

        filename = secure_filename(file.filename)
        if not allowed_file(filename):
            return error_response("Only JPEG or PNG images are supported")

        try:
            result = service.upload_profile_picture(student_id, data=file.read())
        except ValidationError as e:
            return error_response(str(e))
        return result_response(result, failure_status=404)

    @app.route("/personal-details", methods=["GET"], endpoint="personal_details")
    @roles_required(*ANY_ROLE)
    def personal_details():
        return _profile(g.current_user.student_id)

    @app.route("/personal-details/<student_id>", methods=["GET"], endpoint="student_details")
    @roles_required(Role.ADMIN)
    def student_details(student_id: str):
        return _profile(student_id)

    @app.route("/personal-details/picture", methods=["POST"], endpoint="upload_own_picture")
    @roles_required(*ANY_ROLE)
    def upload_own_picture():
        return _upload(g.current_user.student_id)

    @app.route("/personal-details/<student_id>/picture", methods=["POST"], endpoint="upload_student_picture")
    @roles_required(Role.ADMIN)
    def upload_student_picture(student_id: str):
        return _upload(student_id)
