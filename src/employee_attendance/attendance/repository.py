from __future__ import annotations

from datetime import date, datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import AttendanceStatus
from .model import AttendanceRecord, AttendanceRow


class AttendanceRepository(Protocol):
    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def create(
        self,
        *,
        employee_id: int,
        work_date: date,
        check_in: datetime,
        check_out: Optional[datetime],
        status: AttendanceStatus,
        remarks: Optional[str] = None,
    ) -> int:
        """Insert one record. Raises ConflictError when (employee, date) already exists."""
        raise NotImplementedError

    def delete_by_id(self, attendance_id: int) -> bool:
        raise NotImplementedError

    def count(self) -> int:
        raise NotImplementedError

    def list_recent(self, *, limit: Optional[int] = None) -> Sequence[AttendanceRow]:
        """Newest first: date desc, then check-in desc."""
        raise NotImplementedError

    def list_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRow]:
        """Inclusive range, ordered by date asc then employee name asc."""
        raise NotImplementedError
