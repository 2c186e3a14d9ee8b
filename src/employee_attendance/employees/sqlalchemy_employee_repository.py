from __future__ import annotations

from typing import Optional, Sequence

from flask_sqlalchemy import SQLAlchemy

from ..database.models import EmployeeModel
from ..database.session import session_scope
from .model import Employee
from .repository import EmployeeRepository


def _to_entity(row: EmployeeModel) -> Employee:
    return Employee(
        employee_id=int(row.id),
        name=row.name or "",
        position=row.position,
        email=row.email,
        phone=row.phone,
        address=row.address,
        join_date=row.join_date,
    )


class SQLAlchemyEmployeeRepository(EmployeeRepository):
    def __init__(self, db: SQLAlchemy):
        self._db = db

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with session_scope(self._db) as session:
            row = session.get(EmployeeModel, int(employee_id))
            return _to_entity(row) if row else None

    def list_all(self) -> Sequence[Employee]:
        with session_scope(self._db) as session:
            rows = session.query(EmployeeModel).order_by(EmployeeModel.name.asc(), EmployeeModel.id.asc()).all()
            return [_to_entity(r) for r in rows]

    def count(self) -> int:
        with session_scope(self._db) as session:
            return int(session.query(EmployeeModel).count())
