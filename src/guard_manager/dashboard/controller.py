from __future__ import annotations

from flask import Flask, jsonify

from ..common.datetime_utils import now_local
from ..container import Container


def register(app: Flask, container: Container) -> None:
    @app.route("/api/dashboard", methods=["GET"], endpoint="dashboard")
    def dashboard():
        stats = container.dashboard_service.stats(now_local().date())
        return jsonify({"success": True, "stats": stats.to_dict()})
