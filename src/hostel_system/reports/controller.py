from __future__ import annotations

from flask import Flask, jsonify, url_for

from ..common.web import error_response
from ..container import Container
from ..core.enums import Role
from ..users.access import roles_required

REPORT_NAMES = ("students", "fees-due", "room-occupancy")


def register(app: Flask, container: Container) -> None:
    @app.route("/reports", methods=["GET"], endpoint="reports")
    @roles_required(Role.ADMIN)
    def reports():
        return jsonify(
            {
                "success": True,
                "reports": [
                    {"name": name, "url": url_for("download_report", name=name)} for name in REPORT_NAMES
                ],
            }
        )

    @app.route("/reports/<name>.csv", methods=["GET"], endpoint="download_report")
    @roles_required(Role.ADMIN)
    def download_report(name: str):
        try:
            report = container.report_service.by_name(name)
        except KeyError:
            return error_response("Unknown report", 404)

        return app.response_class(
            report.to_csv(),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={report.filename}"},
        )
