from __future__ import annotations

import logging

from flask import Flask, g, jsonify, redirect, request, url_for

from ..common.web import error_response, request_data
from ..container import Container
from ..core.enums import Role
from ..core.exceptions import AuthenticationError
from .access import ANY_ROLE, nav_for, roles_required

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/login", methods=["GET", "POST"], endpoint="login")
    def login():
        if g.current_user is not None:
            return redirect(url_for("index"))

        if request.method == "GET":
            return jsonify({"authenticated": False, "roles": [r.value for r in Role]})

        data = request_data()
        # The password field is accepted but not verified.
        email = str(data.get("email", "")).strip()
        role = str(data.get("role", Role.STUDENT.value)).strip().lower()

        try:
            user = container.auth_service.login(email, role)
        except AuthenticationError as e:
            return error_response(str(e), 401)

        g.session_manager.login(user)
        return jsonify({"success": True, "user": user.to_record()})

    @app.route("/logout", methods=["POST"], endpoint="logout")
    def logout():
        if g.current_user is not None:
            logger.info("Logout %s", g.current_user.email)
        g.session_manager.logout()
        return jsonify({"success": True})

    @app.route("/", endpoint="index")
    @roles_required(*ANY_ROLE)
    def index():
        return redirect(url_for("dashboard"))

    @app.route("/api/nav", endpoint="api_nav")
    @roles_required(*ANY_ROLE)
    def api_nav():
        user = g.current_user
        return jsonify({"user": user.to_record(), "items": [item.to_dict() for item in nav_for(user.role)]})
