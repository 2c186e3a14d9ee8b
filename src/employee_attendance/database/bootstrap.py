from __future__ import annotations

import logging

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import inspect

from ..core.constants import DEFAULT_EMPLOYEES
from .models import EmployeeModel
from .session import session_scope

logger = logging.getLogger(__name__)


def create_schema(db: SQLAlchemy) -> None:
    # create_all only creates missing tables, so this is safe to repeat.
    db.create_all()


def seed_default_employees(db: SQLAlchemy) -> int:
    """Insert placeholder employees when the table is empty.

    Returns the number of employees added (0 when any employee already exists).
    """
    with session_scope(db) as session:
        if session.query(EmployeeModel.id).first() is not None:
            return 0

        session.add_all(EmployeeModel(name=name, position=position) for name, position in DEFAULT_EMPLOYEES)

    logger.info("Seeded %d default employees", len(DEFAULT_EMPLOYEES))
    return len(DEFAULT_EMPLOYEES)


def list_tables(db: SQLAlchemy) -> list[str]:
    return sorted(inspect(db.engine).get_table_names())
