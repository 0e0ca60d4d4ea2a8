from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.web import error_response, request_data, result_response
from ..container import Container
from ..core.constants import ALL_FEES
from ..core.enums import Role
from ..core.exceptions import ValidationError
from ..users.access import roles_required


def register(app: Flask, container: Container) -> None:
    service = container.fee_service

    @app.route("/fees", methods=["GET"], endpoint="fees")
    @roles_required(Role.ADMIN)
    def list_fees():
        status = request.args.get("status", ALL_FEES)
        try:
            rows = service.list_fees(status)
        except ValidationError as e:
            return error_response(str(e))
        return jsonify({"success": True, "filter": status, "fees": [r.to_dict() for r in rows]})

    @app.route("/fees/<fee_id>/status", methods=["POST"], endpoint="update_fee_status")
    @roles_required(Role.ADMIN)
    def update_fee_status(fee_id: str):
        try:
            result = service.update_status(fee_id, str(request_data().get("status", "")))
        except ValidationError as e:
            return error_response(str(e))
        return result_response(result, failure_status=404)
