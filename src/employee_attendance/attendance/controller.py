from __future__ import annotations

import logging

from flask import Flask, flash, redirect, render_template, request, url_for

from ..common.datetime_utils import now_local, parse_iso_date_or_none, parse_time_of_day
from ..common.validators import optional_int
from ..container import Container
from ..core.exceptions import ConflictError, NotFoundError, StoreError, ValidationError
from .model import AttendanceEntry

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    def _employee_options() -> list[tuple[int, str]]:
        try:
            return container.employee_service.dropdown_options()
        except StoreError:
            logger.exception("Could not load employees for dropdown")
            return []

    def _render_create(form: dict, errors: dict):
        now = now_local()
        return render_template(
            "attendance/create.html",
            form=form,
            errors=errors,
            employees=_employee_options(),
            today=now.strftime("%Y-%m-%d"),
            current_time=now.strftime("%H:%M"),
            active_page="create",
        )

    @app.route("/attendance", endpoint="attendance_index")
    def attendance_index():
        try:
            data = container.attendance_service.get_history_ui()
        except StoreError as e:
            logger.exception("Attendance list unavailable")
            flash(e.message, "danger")
            data = []
        return render_template("attendance/index.html", data=data, active_page="index")

    @app.route("/attendance/create", methods=["GET", "POST"], endpoint="attendance_create")
    def attendance_create():
        if request.method == "GET":
            return _render_create(form={}, errors={})

        form = request.form.to_dict()
        entry = AttendanceEntry(
            employee_id=form.get("employee_id"),
            work_date=parse_iso_date_or_none(form.get("work_date")),
            check_in=parse_time_of_day(form.get("check_in")),
            check_out=parse_time_of_day(form.get("check_out")),
            status=form.get("status"),
            remarks=form.get("remarks"),
        )

        try:
            container.attendance_service.record(entry)
            flash("Attendance saved successfully!", "success")
            return redirect(url_for("attendance_index"))
        except (ValidationError, ConflictError) as e:
            logger.warning("Attendance entry rejected: %s", e.message)
            flash(e.message, "warning")
            return _render_create(form=form, errors={e.field or "__all__": e.message})
        except StoreError as e:
            logger.exception("Attendance entry could not be stored")
            flash(e.message, "danger")
        except Exception as e:
            logger.exception("Unexpected error while saving attendance")
            flash(f"Error: {e}", "danger")
        return _render_create(form=form, errors={})

    @app.route("/attendance/<int:attendance_id>/delete", methods=["POST"], endpoint="attendance_delete")
    def attendance_delete(attendance_id: int):
        try:
            container.attendance_service.delete(attendance_id)
            flash("Attendance deleted successfully!", "success")
        except NotFoundError as e:
            flash(e.message, "warning")
        except StoreError:
            logger.exception("Could not delete attendance %s", attendance_id)
            flash("Error deleting attendance.", "danger")
        return redirect(url_for("attendance_index"))

    @app.route("/attendance/calendar", endpoint="attendance_calendar")
    def attendance_calendar():
        today = now_local().date()
        year = optional_int(request.args.get("year")) or today.year
        month = optional_int(request.args.get("month")) or today.month
        employee_id = optional_int(request.args.get("employee_id"))

        try:
            try:
                cal = container.attendance_service.build_calendar(year, month, employee_id)
            except ValidationError as e:
                flash(e.message, "warning")
                cal = container.attendance_service.build_calendar(today.year, today.month, employee_id)
        except StoreError as e:
            logger.exception("Calendar data unavailable")
            flash(e.message, "danger")
            cal = None

        return render_template(
            "attendance/calendar.html",
            calendar=cal,
            employees=_employee_options(),
            employee_id=employee_id,
            active_page="calendar",
        )
