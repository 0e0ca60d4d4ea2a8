from __future__ import annotations

from typing import Any, Callable, Optional

from flask import jsonify, request

from ..core.result import OperationResult


def request_data() -> dict[str, Any]:
    """Body of a JSON or form-encoded request."""
    data = request.get_json(silent=True)
    if isinstance(data, dict):
        return data
    return request.form.to_dict()


def parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    return str(value).strip().lower() in {"1", "true", "yes", "on", "present"}


def result_response(
    result: OperationResult,
    *,
    serialize: Optional[Callable[[Any], Any]] = None,
    failure_status: int = 400,
):
    body = result.to_dict()
    if not result.success:
        return jsonify(body), failure_status
    if result.data is not None:
        body["data"] = serialize(result.data) if serialize else result.data.to_dict()
    return jsonify(body), 200


def error_response(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status
