from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class EmployeeAttendanceSummary:
    """Per-employee statistics over a report range."""

    employee_id: int
    name: str
    position: Optional[str]
    present_days: int
    absent_days: int
    late_days: int
    total_days_in_range: int
    attendance_percentage: float
    total_working_hours: float


@dataclass(frozen=True)
class ReportTotals:
    total_records: int = 0
    total_employees: int = 0
    present_count: int = 0
    absent_count: int = 0
    late_count: int = 0
    on_time_count: int = 0
    total_days_in_range: int = 0
    total_possible_attendance: int = 0
    attendance_rate: float = 0.0
    total_working_hours: float = 0.0


@dataclass(frozen=True)
class ReportData:
    start: date
    end: date
    employee_id: Optional[int]
    employee_label: str
    rows: list[dict] = field(default_factory=list)
    summary: list[EmployeeAttendanceSummary] = field(default_factory=list)
    totals: ReportTotals = field(default_factory=ReportTotals)

    @classmethod
    def empty(cls, *, start: date, end: date, employee_id: Optional[int], employee_label: str) -> "ReportData":
        return cls(start=start, end=end, employee_id=employee_id, employee_label=employee_label)


@dataclass(frozen=True)
class DashboardStats:
    """Numbers behind the summary page."""

    today_label: str
    month_label: str
    total_employees: int = 0
    total_records: int = 0
    present_today: int = 0
    absent_today: int = 0
    attendance_rate: float = 0.0
    monthly_total: int = 0
    todays_attendance: list[dict] = field(default_factory=list)

    @classmethod
    def empty(cls, today: date) -> "DashboardStats":
        return cls(today_label=today.strftime("%d-%m-%Y"), month_label=today.strftime("%b %Y"))
