from __future__ import annotations

from dataclasses import dataclass
from datetime import time

from flask_sqlalchemy import SQLAlchemy

from .attendance.factory import AttendanceStrategyFactory
from .attendance.service import AttendanceService
from .attendance.sqlalchemy_attendance_repository import SQLAlchemyAttendanceRepository
from .core.constants import DEFAULT_WORKDAY_START
from .employees.service import EmployeeService
from .employees.sqlalchemy_employee_repository import SQLAlchemyEmployeeRepository
from .reports.service import ReportService


@dataclass(frozen=True)
class Container:
    db: SQLAlchemy

    employees_repo: SQLAlchemyEmployeeRepository
    attendance_repo: SQLAlchemyAttendanceRepository

    employee_service: EmployeeService
    attendance_service: AttendanceService
    report_service: ReportService


def build_container(*, db: SQLAlchemy, workday_start: time = DEFAULT_WORKDAY_START) -> Container:
    employees_repo = SQLAlchemyEmployeeRepository(db)
    attendance_repo = SQLAlchemyAttendanceRepository(db)

    employee_service = EmployeeService(employees_repo)
    attendance_service = AttendanceService(
        attendance_repo,
        employees_repo,
        strategy_factory=AttendanceStrategyFactory(),
        workday_start=workday_start,
    )
    report_service = ReportService(attendance_repo, employees_repo)

    return Container(
        db=db,
        employees_repo=employees_repo,
        attendance_repo=attendance_repo,
        employee_service=employee_service,
        attendance_service=attendance_service,
        report_service=report_service,
    )
