from __future__ import annotations

import calendar
import logging
from datetime import date, datetime, time
from typing import Optional

from ..common.datetime_utils import combine, now_local
from ..common.validators import optional_text, require_month, require_positive_int
from ..core.constants import DEFAULT_CHECK_IN_TIME, DEFAULT_WORKDAY_START, MAX_REMARKS_LENGTH
from ..core.enums import AttendanceStatus
from ..core.exceptions import NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from .factory import AttendanceStrategyFactory
from .model import AttendanceEntry, AttendanceRow, CalendarDay, CalendarMonth
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)

STATUS_CSS = {
    AttendanceStatus.PRESENT: "bg-success",
    AttendanceStatus.LATE: "bg-warning text-dark",
    AttendanceStatus.ABSENT: "bg-danger",
}


def to_ui(r: AttendanceRow) -> dict:
    return {
        "id": r.attendance_id,
        "employee_id": r.employee_id,
        "employee_name": r.employee_name or "-",
        "position": r.position or "-",
        "date": r.work_date.strftime("%Y-%m-%d"),
        "check_in": r.check_in.strftime("%H:%M"),
        "check_out": r.check_out.strftime("%H:%M") if r.check_out else "-",
        "status": r.status.value,
        "css_class": STATUS_CSS.get(r.status, "bg-secondary"),
        "remarks": r.remarks or "",
    }


class AttendanceService:
    def __init__(
        self,
        attendance: AttendanceRepository,
        employees: EmployeeRepository,
        *,
        strategy_factory: AttendanceStrategyFactory | None = None,
        workday_start: time = DEFAULT_WORKDAY_START,
    ):
        self._attendance = attendance
        self._employees = employees
        self._factory = strategy_factory or AttendanceStrategyFactory()
        self._workday_start = workday_start

    def record(self, entry: AttendanceEntry, *, now: datetime | None = None) -> int:
        """Validate, normalize and store one attendance entry.

        The date defaults to today; check-in and check-out keep only their
        time of day and are moved onto that date. Status is always derived
        from the check-in time, whatever the caller sent.
        """
        now = now or now_local()

        employee_id = require_positive_int(entry.employee_id, "employee_id", "Please select an employee.")
        if not self._employees.get_by_id(employee_id):
            raise ValidationError("Selected employee does not exist.", field="employee_id")

        work_date = entry.work_date or now.date()
        check_in = combine(work_date, entry.check_in or DEFAULT_CHECK_IN_TIME)
        check_out = combine(work_date, entry.check_out) if entry.check_out else None
        if check_out is not None and check_out < check_in:
            raise ValidationError("Check out time cannot be earlier than check in time.", field="check_out")

        remarks = optional_text(entry.remarks, "remarks", MAX_REMARKS_LENGTH)

        strategy = self._factory.for_checkin(check_in=check_in, workday_start=self._workday_start)
        decision = strategy.decide_checkin(check_in=check_in, workday_start=self._workday_start)

        attendance_id = self._attendance.create(
            employee_id=employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            status=decision.status,
            remarks=remarks,
        )
        logger.info(
            "Recorded attendance %s for employee %s on %s (%s)",
            attendance_id,
            employee_id,
            work_date,
            decision.status.value,
        )
        return attendance_id

    def delete(self, attendance_id: int) -> None:
        if not self._attendance.get_by_id(attendance_id):
            raise NotFoundError("Attendance record not found.")
        if not self._attendance.delete_by_id(attendance_id):
            raise NotFoundError("Attendance record not found.")
        logger.info("Deleted attendance %s", attendance_id)

    def get_history_ui(self, *, limit: Optional[int] = None) -> list[dict]:
        return [to_ui(r) for r in self._attendance.list_recent(limit=limit)]

    def count(self) -> int:
        return self._attendance.count()

    def build_calendar(self, year, month, employee_id: Optional[int] = None) -> CalendarMonth:
        year, month = require_month(year, month)
        try:
            weeks = calendar.Calendar(firstweekday=calendar.MONDAY).monthdatescalendar(year, month)
        except (ValueError, OverflowError):
            # The grid spills into neighbouring months, past date.max for December 9999.
            raise ValidationError("Invalid month or year", field="month") from None

        first, last = weeks[0][0], weeks[-1][-1]
        by_day: dict[date, list[dict]] = {}
        for r in self._attendance.list_in_range(start_date=first, end_date=last, employee_id=employee_id):
            by_day.setdefault(r.work_date, []).append(to_ui(r))

        return CalendarMonth(
            year=year,
            month=month,
            title=date(year, month, 1).strftime("%B %Y"),
            employee_id=employee_id,
            weeks=tuple(
                tuple(CalendarDay(day=d, in_month=d.month == month, entries=tuple(by_day.get(d, ()))) for d in week)
                for week in weeks
            ),
        )
