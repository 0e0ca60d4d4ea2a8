from __future__ import annotations

from flask import Flask, jsonify

from ..container import Container
from ..core.enums import Role
from ..users.access import roles_required


def register(app: Flask, container: Container) -> None:
    @app.route("/dashboard", endpoint="dashboard")
    @roles_required(Role.ADMIN)
    def dashboard():
        stats = container.dashboard_service.get_stats()
        return jsonify({"success": True, "stats": stats.to_dict()})

    @app.route("/api/stats", endpoint="api_stats")
    @roles_required(Role.ADMIN)
    def api_stats():
        return jsonify({"success": True, **container.dashboard_service.get_stats().to_dict()})
