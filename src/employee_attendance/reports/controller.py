from __future__ import annotations

import io
import logging
from datetime import date
from typing import Optional

from flask import Flask, flash, redirect, render_template, request, send_file, url_for

from ..common.datetime_utils import month_range, now_local, parse_iso_date_or_none
from ..common.validators import optional_int, require_month
from ..container import Container
from ..core.constants import ALL_EMPLOYEES_LABEL
from ..core.exceptions import StoreError, ValidationError
from .export import export_report, parse_format
from .model import DashboardStats, ReportData

logger = logging.getLogger(__name__)

MONTHS = [(m, date(2000, m, 1).strftime("%B")) for m in range(1, 13)]


def _report_range(args, today: date) -> tuple[date, date]:
    """`start`/`end` win over `year`/`month`; the current month is the default."""
    start = parse_iso_date_or_none(args.get("start"))
    end = parse_iso_date_or_none(args.get("end"))
    if start and end:
        return start, end

    year = optional_int(args.get("year")) or today.year
    month = optional_int(args.get("month")) or today.month
    return month_range(*require_month(year, month))


def register(app: Flask, container: Container) -> None:
    def _employee_options() -> list[tuple[int, str]]:
        try:
            return container.employee_service.dropdown_options()
        except StoreError:
            logger.exception("Could not load employees for dropdown")
            return []

    def _load_report(employee_id: Optional[int]) -> ReportData:
        """Build the requested report, degrading to an empty one on any failure."""
        today = now_local().date()
        try:
            start, end = _report_range(request.args, today)
            return container.report_service.build_report(start=start, end=end, employee_id=employee_id)
        except ValidationError as e:
            flash(e.message, "warning")
        except StoreError as e:
            logger.exception("Report data unavailable")
            flash(f"Error loading reports: {e.message}", "danger")

        start, end = month_range(today.year, today.month)
        return ReportData.empty(start=start, end=end, employee_id=employee_id, employee_label=ALL_EMPLOYEES_LABEL)

    def _render_report(template: str, report: ReportData, active_page: str):
        current_year = now_local().year
        return render_template(
            template,
            report=report,
            employees=_employee_options(),
            months=MONTHS,
            years=list(range(current_year - 2, current_year + 2)),
            selected_year=report.start.year,
            selected_month=report.start.month,
            start=report.start.strftime("%Y-%m-%d"),
            end=report.end.strftime("%Y-%m-%d"),
            active_page=active_page,
        )

    @app.route("/attendance/summary", endpoint="attendance_summary")
    def attendance_summary():
        today = now_local().date()
        try:
            stats = container.report_service.build_dashboard(today=today)
            load_error = False
        except StoreError:
            logger.exception("Dashboard statistics unavailable")
            flash("Statistics are temporarily unavailable.", "danger")
            stats = DashboardStats.empty(today)
            load_error = True
        return render_template("reports/summary.html", stats=stats, load_error=load_error, active_page="summary")

    @app.route("/attendance/reports", endpoint="attendance_reports")
    def attendance_reports():
        report = _load_report(optional_int(request.args.get("employee_id")))
        return _render_report("reports/reports.html", report, "reports")

    @app.route("/attendance/monthly", endpoint="attendance_monthly")
    def attendance_monthly():
        today = now_local().date()
        year = optional_int(request.args.get("year")) or today.year
        month = optional_int(request.args.get("month")) or today.month
        employee_id = optional_int(request.args.get("employee_id"))

        try:
            report = container.report_service.monthly_summary(year, month, employee_id)
        except ValidationError as e:
            flash(e.message, "warning")
            report = None
        except StoreError as e:
            logger.exception("Monthly summary unavailable")
            flash(f"Error loading reports: {e.message}", "danger")
            report = None

        if report is None:
            start, end = month_range(today.year, today.month)
            report = ReportData.empty(
                start=start, end=end, employee_id=employee_id, employee_label=ALL_EMPLOYEES_LABEL
            )
        return _render_report("reports/monthly.html", report, "monthly")

    @app.route("/attendance/reports/export", endpoint="attendance_export")
    def attendance_export():
        args = request.args.to_dict()
        fmt_value = args.pop("format", None)
        try:
            fmt = parse_format(fmt_value)
            start, end = _report_range(request.args, now_local().date())
            report = container.report_service.build_report(
                start=start,
                end=end,
                employee_id=optional_int(request.args.get("employee_id")),
            )
            export = export_report(report, fmt)
        except ValidationError as e:
            flash(e.message, "warning")
            return redirect(url_for("attendance_reports", **args))
        except StoreError as e:
            logger.exception("Export failed")
            flash(f"Export error: {e.message}", "danger")
            return redirect(url_for("attendance_reports", **args))

        logger.info("Exported %d attendance rows as %s", len(report.rows), fmt.value)
        return send_file(
            io.BytesIO(export.content),
            mimetype=export.mimetype,
            as_attachment=True,
            download_name=export.filename,
        )
