from __future__ import annotations

from datetime import date

from ..core.constants import MAX_REMARKS_LENGTH, MAX_STATUS_LENGTH
from ..core.enums import AttendanceStatus
from ..extensions import db


class EmployeeModel(db.Model):
    __tablename__ = "employees"

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255))
    phone = db.Column(db.String(50))
    address = db.Column(db.String(255))
    position = db.Column(db.String(100))
    join_date = db.Column(db.Date, nullable=False, default=date.today)

    attendances = db.relationship("AttendanceModel", back_populates="employee", lazy=True)


class AttendanceModel(db.Model):
    __tablename__ = "attendances"
    # One attendance per employee per calendar day
    __table_args__ = (db.UniqueConstraint("employee_id", "work_date", name="uq_attendance_employee_date"),)

    id = db.Column(db.Integer, primary_key=True)
    employee_id = db.Column(db.Integer, db.ForeignKey("employees.id"), nullable=False)
    work_date = db.Column(db.Date, nullable=False)
    check_in = db.Column(db.DateTime, nullable=False)
    check_out = db.Column(db.DateTime)
    status = db.Column(db.String(MAX_STATUS_LENGTH), nullable=False, default=AttendanceStatus.PRESENT.value)
    remarks = db.Column(db.String(MAX_REMARKS_LENGTH))

    employee = db.relationship("EmployeeModel", back_populates="attendances")
