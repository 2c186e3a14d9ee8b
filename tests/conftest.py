from __future__ import annotations

from datetime import datetime

import pytest

from employee_attendance.extensions import db
from employee_attendance.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 2, 2, 10, 0, 0)


@pytest.fixture
def app():
    app = create_app("employee_attendance.config.testing")
    yield app
    with app.app_context():
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def container(app):
    return app.extensions["attendance_container"]


@pytest.fixture
def seeded(app):
    """Three default employees, ids 1..3 in seed order."""
    from employee_attendance.database.bootstrap import seed_default_employees

    with app.app_context():
        seed_default_employees(db)
    return app
