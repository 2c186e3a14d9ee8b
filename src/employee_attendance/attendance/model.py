from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any, Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one employee's attendance for one day."""

    attendance_id: int
    employee_id: int
    work_date: date
    check_in: datetime
    check_out: Optional[datetime]
    status: AttendanceStatus
    remarks: Optional[str] = None


@dataclass(frozen=True)
class AttendanceRow:
    """Read-model for listings and reports (record joined with its employee)."""

    attendance_id: int
    employee_id: int
    employee_name: str
    position: Optional[str]
    work_date: date
    check_in: datetime
    check_out: Optional[datetime]
    status: AttendanceStatus
    remarks: Optional[str] = None


@dataclass(frozen=True)
class AttendanceEntry:
    """A submitted attendance form before validation.

    `status` is accepted for form compatibility but always re-derived.
    """

    employee_id: Any
    work_date: Optional[date] = None
    check_in: Optional[time] = None
    check_out: Optional[time] = None
    status: Optional[str] = None
    remarks: Optional[str] = None


@dataclass(frozen=True)
class CalendarDay:
    day: date
    in_month: bool
    entries: tuple[dict, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class CalendarMonth:
    year: int
    month: int
    title: str
    employee_id: Optional[int]
    weeks: tuple[tuple[CalendarDay, ...], ...]
