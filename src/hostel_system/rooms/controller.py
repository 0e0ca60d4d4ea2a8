from __future__ import annotations

from flask import Flask, jsonify

from ..common.web import error_response, request_data, result_response
from ..container import Container
from ..core.enums import Role
from ..users.access import roles_required
from .model import Allocation


def _allocation_to_dict(allocation: Allocation) -> dict:
    return {"room": allocation.room.to_dict(), "student": allocation.student.to_dict()}


def register(app: Flask, container: Container) -> None:
    service = container.room_service

    @app.route("/rooms", methods=["GET"], endpoint="rooms")
    @roles_required(Role.ADMIN)
    def list_rooms():
        return jsonify(
            {
                "success": True,
                "rooms": [card.to_dict() for card in service.list_rooms()],
                "unallocated_students": [
                    {"id": s.id, "name": s.name} for s in service.list_unallocated_students()
                ],
            }
        )

    @app.route("/rooms/<room_id>/allocate", methods=["POST"], endpoint="allocate_room")
    @roles_required(Role.ADMIN)
    def allocate_room(room_id: str):
        student_id = str(request_data().get("student_id", "")).strip()
        if not student_id:
            return error_response("student_id is required")
        return result_response(service.allocate(student_id, room_id), serialize=_allocation_to_dict)

    @app.route("/students/<student_id>/deallocate", methods=["POST"], endpoint="deallocate_room")
    @roles_required(Role.ADMIN)
    def deallocate_room(student_id: str):
        return result_response(service.deallocate(student_id))
