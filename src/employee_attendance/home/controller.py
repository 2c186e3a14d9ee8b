from __future__ import annotations

import logging

from flask import Flask, flash, jsonify, render_template

from ..container import Container
from ..core.exceptions import StoreError
from ..database.bootstrap import list_tables

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    @app.route("/", endpoint="home")
    def home():
        total_employees = 0
        total_attendance = 0
        try:
            total_employees = container.employee_service.count()
            total_attendance = container.attendance_service.count()
        except StoreError as e:
            logger.exception("Home page statistics unavailable")
            flash(e.message, "danger")
        return render_template(
            "home.html",
            total_employees=total_employees,
            total_attendance=total_attendance,
            active_page="home",
        )

    @app.route("/health", endpoint="health")
    def health():
        try:
            tables = list_tables(container.db)
        except Exception as e:
            logger.warning("Health check failed: %s", e)
            return jsonify({"status": "error", "message": str(e)}), 503
        return jsonify({"status": "ok", "tables": tables})
