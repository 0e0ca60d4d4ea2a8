from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, g, jsonify, session

from .config import get_settings_module
from .container import build_container
from .attendance.controller import register as register_attendance
from .dashboard.controller import register as register_dashboard
from .fees.controller import register as register_fees
from .reports.controller import register as register_reports
from .rooms.controller import register as register_rooms
from .students.controller import register as register_students
from .users.controller import register as register_users
from .users.session import SessionManager

logger = logging.getLogger(__name__)


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["SESSION_KEY"] = getattr(settings, "SESSION_KEY", "hms_user")

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
    latency_ms = int(getattr(settings, "SIMULATED_LATENCY_MS", 0))
    logger.info("[hostel-system] settings=%s latency=%sms", settings_module, latency_ms)

    container = build_container(
        latency_ms=latency_ms,
        seed=bool(getattr(settings, "SEED_DEMO_DATA", True)),
    )
    app.extensions["hostel_container"] = container

    @app.before_request
    def load_current_user():
        g.session_manager = SessionManager(session, key=app.config["SESSION_KEY"])
        g.current_user = g.session_manager.load()

    @app.errorhandler(404)
    def not_found(_error):
        return jsonify({"success": False, "message": "Page not found"}), 404

    register_users(app, container)
    register_dashboard(app, container)
    register_students(app, container)
    register_rooms(app, container)
    register_fees(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    return app


if __name__ == "__main__":
    create_app().run()
