from __future__ import annotations

from datetime import date
from typing import Optional

from ..attendance.model import AttendanceRow
from ..attendance.repository import AttendanceRepository
from ..attendance.service import to_ui
from ..common.datetime_utils import days_in_range, month_range
from ..common.validators import require_month
from ..core.constants import ALL_EMPLOYEES_LABEL, HOURS_PRECISION, PERCENT_PRECISION, UNKNOWN_EMPLOYEE_LABEL
from ..core.enums import AttendanceStatus
from ..core.exceptions import ValidationError
from ..employees.repository import EmployeeRepository
from .calculator.base import WorkedHoursCalculator
from .calculator.standard_calculator import StandardWorkedHoursCalculator
from .model import DashboardStats, EmployeeAttendanceSummary, ReportData, ReportTotals


def percentage(part: int, whole: int) -> float:
    if whole <= 0:
        return 0.0
    return round(part / whole * 100, PERCENT_PRECISION)


class ReportService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[WorkedHoursCalculator] = None,
    ):
        self._attendance = attendance
        self._employees = employees
        self._calculator = calculator or StandardWorkedHoursCalculator()

    def build_report(self, *, start: date, end: date, employee_id: Optional[int] = None) -> ReportData:
        if start > end:
            raise ValidationError("Start date must not be after end date.", field="start")

        query_rows = self._attendance.list_in_range(start_date=start, end_date=end, employee_id=employee_id)
        total_days = days_in_range(start, end)
        total_employees = self._employees.count()

        if employee_id is not None:
            employee = self._employees.get_by_id(employee_id)
            scope = [employee] if employee else []
            label = employee.name if employee else UNKNOWN_EMPLOYEE_LABEL
            possible = total_days
        else:
            scope = list(self._employees.list_all())
            label = ALL_EMPLOYEES_LABEL
            possible = total_days * total_employees

        by_employee: dict[int, list[AttendanceRow]] = {}
        out_rows: list[dict] = []
        total_hours = 0.0
        for r in query_rows:
            hours = self._calculator.worked_hours(r)
            total_hours += hours
            by_employee.setdefault(r.employee_id, []).append(r)

            ui = to_ui(r)
            ui["worked_hours"] = f"{hours:.2f}"
            out_rows.append(ui)

        summary = [
            self._summarize(e.employee_id, e.name, e.position, by_employee.get(e.employee_id, []), total_days)
            for e in scope
        ]

        present = sum(1 for r in query_rows if r.status.counts_as_present)
        totals = ReportTotals(
            total_records=len(query_rows),
            total_employees=total_employees,
            present_count=present,
            absent_count=sum(1 for r in query_rows if r.status == AttendanceStatus.ABSENT),
            late_count=sum(1 for r in query_rows if r.status == AttendanceStatus.LATE),
            on_time_count=sum(1 for r in query_rows if r.status == AttendanceStatus.PRESENT),
            total_days_in_range=total_days,
            total_possible_attendance=possible,
            attendance_rate=percentage(present, possible),
            total_working_hours=round(total_hours, HOURS_PRECISION),
        )

        return ReportData(
            start=start,
            end=end,
            employee_id=employee_id,
            employee_label=label,
            rows=out_rows,
            summary=summary,
            totals=totals,
        )

    def monthly_summary(self, year, month, employee_id: Optional[int] = None) -> ReportData:
        year, month = require_month(year, month)
        start, end = month_range(year, month)
        return self.build_report(start=start, end=end, employee_id=employee_id)

    def build_dashboard(self, *, today: date) -> DashboardStats:
        todays_rows = self._attendance.list_in_range(start_date=today, end_date=today)
        month_start, month_end = month_range(today.year, today.month)
        monthly_rows = self._attendance.list_in_range(start_date=month_start, end_date=month_end)
        total_employees = self._employees.count()

        present_today = sum(1 for r in todays_rows if r.status.counts_as_present)

        return DashboardStats(
            today_label=today.strftime("%d-%m-%Y"),
            month_label=today.strftime("%b %Y"),
            total_employees=total_employees,
            total_records=self._attendance.count(),
            present_today=present_today,
            absent_today=max(total_employees - present_today, 0),
            attendance_rate=percentage(present_today, total_employees),
            monthly_total=len(monthly_rows),
            todays_attendance=[to_ui(r) for r in todays_rows],
        )

    def _summarize(
        self,
        employee_id: int,
        name: str,
        position: Optional[str],
        rows: list[AttendanceRow],
        total_days: int,
    ) -> EmployeeAttendanceSummary:
        present = sum(1 for r in rows if r.status.counts_as_present)
        return EmployeeAttendanceSummary(
            employee_id=employee_id,
            name=name,
            position=position,
            present_days=present,
            absent_days=sum(1 for r in rows if r.status == AttendanceStatus.ABSENT),
            late_days=sum(1 for r in rows if r.status == AttendanceStatus.LATE),
            total_days_in_range=total_days,
            attendance_percentage=percentage(present, total_days),
            total_working_hours=round(sum(self._calculator.worked_hours(r) for r in rows), HOURS_PRECISION),
        )
