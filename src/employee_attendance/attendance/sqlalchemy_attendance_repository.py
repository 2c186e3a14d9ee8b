from __future__ import annotations

import logging
from datetime import date, datetime
from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import func
from sqlalchemy.exc import IntegrityError

from ..core.enums import AttendanceStatus
from ..core.exceptions import ConflictError, ValidationError
from ..database.models import AttendanceModel, EmployeeModel
from ..database.session import session_scope
from .model import AttendanceRecord, AttendanceRow
from .repository import AttendanceRepository

logger = logging.getLogger(__name__)


def _to_record(row: AttendanceModel) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(row.id),
        employee_id=int(row.employee_id),
        work_date=row.work_date,
        check_in=row.check_in,
        check_out=row.check_out,
        status=AttendanceStatus(row.status),
        remarks=row.remarks,
    )


def _to_row(row: AttendanceModel, name: Optional[str], position: Optional[str]) -> AttendanceRow:
    return AttendanceRow(
        attendance_id=int(row.id),
        employee_id=int(row.employee_id),
        employee_name=name or "",
        position=position,
        work_date=row.work_date,
        check_in=row.check_in,
        check_out=row.check_out,
        status=AttendanceStatus(row.status),
        remarks=row.remarks,
    )


class SQLAlchemyAttendanceRepository(AttendanceRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def _joined_query(self, session):
        return session.query(AttendanceModel, EmployeeModel.name, EmployeeModel.position).outerjoin(
            EmployeeModel, EmployeeModel.id == AttendanceModel.employee_id
        )

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with session_scope(self._db) as session:
            row = session.get(AttendanceModel, int(attendance_id))
            return _to_record(row) if row else None

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        with session_scope(self._db) as session:
            row = (
                session.query(AttendanceModel)
                .filter(AttendanceModel.employee_id == int(employee_id), AttendanceModel.work_date == work_date)
                .first()
            )
            return _to_record(row) if row else None

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
        try:
            with session_scope(self._db) as session:
                row = AttendanceModel(
                    employee_id=int(employee_id),
                    work_date=work_date,
                    check_in=check_in,
                    check_out=check_out,
                    status=status.value,
                    remarks=remarks,
                )
                session.add(row)
                session.flush()
                new_id = int(row.id)
        except IntegrityError as exc:
            # Either the unique (employee, date) key or the employee foreign key.
            if self.get_for_employee_and_date(employee_id, work_date) is not None:
                raise ConflictError(
                    f"Attendance for this employee on {work_date:%Y-%m-%d} already exists",
                    field="work_date",
                ) from exc
            logger.warning("Attendance insert rejected for employee %s: %s", employee_id, exc.orig)
            raise ValidationError("Employee not found. Please add employee first.", field="employee_id") from exc
        return new_id

    def delete_by_id(self, attendance_id: int) -> bool:
        with session_scope(self._db) as session:
            deleted = session.query(AttendanceModel).filter(AttendanceModel.id == int(attendance_id)).delete()
            return deleted > 0

    def count(self) -> int:
        with session_scope(self._db) as session:
            return int(session.query(AttendanceModel).count())

    def list_recent(self, *, limit: Optional[int] = None) -> Sequence[AttendanceRow]:
        with session_scope(self._db) as session:
            query = self._joined_query(session).order_by(
                AttendanceModel.work_date.desc(),
                AttendanceModel.check_in.desc(),
            )
            if limit is not None:
                query = query.limit(int(limit))
            return [_to_row(r, name, position) for r, name, position in query.all()]

    def list_in_range(
        self,
        *,
        start_date: date,
        end_date: date,
        employee_id: Optional[int] = None,
    ) -> Sequence[AttendanceRow]:
        with session_scope(self._db) as session:
            query = self._joined_query(session).filter(AttendanceModel.work_date.between(start_date, end_date))
            if employee_id is not None:
                query = query.filter(AttendanceModel.employee_id == int(employee_id))

            query = query.order_by(
                AttendanceModel.work_date.asc(),
                func.coalesce(EmployeeModel.name, "").asc(),
                AttendanceModel.id.asc(),
            )
            return [_to_row(r, name, position) for r, name, position in query.all()]
