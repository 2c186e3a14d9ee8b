from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional

import pytest

from employee_attendance.attendance.model import AttendanceEntry, AttendanceRecord, AttendanceRow
from employee_attendance.attendance.service import AttendanceService
from employee_attendance.core.enums import AttendanceStatus
from employee_attendance.core.exceptions import ConflictError, NotFoundError, ValidationError
from employee_attendance.employees.model import Employee


@dataclass
class InMemoryEmployees:
    employees: dict[int, Employee]

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self.employees.get(employee_id)

    def list_all(self):
        return sorted(self.employees.values(), key=lambda e: e.name)

    def count(self) -> int:
        return len(self.employees)


class InMemoryAttendance:
    def __init__(self, names: dict[int, str]):
        self._names = names
        self._by_id: dict[int, AttendanceRecord] = {}
        self._id = 0

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._by_id.get(attendance_id)

    def get_for_employee_and_date(self, employee_id: int, work_date: date) -> Optional[AttendanceRecord]:
        for r in self._by_id.values():
            if r.employee_id == employee_id and r.work_date == work_date:
                return r
        return None

    def create(self, *, employee_id, work_date, check_in, check_out, status, remarks=None) -> int:
        if self.get_for_employee_and_date(employee_id, work_date):
            raise ConflictError("Attendance for this employee on this date already exists", field="work_date")
        self._id += 1
        self._by_id[self._id] = AttendanceRecord(
            attendance_id=self._id,
            employee_id=employee_id,
            work_date=work_date,
            check_in=check_in,
            check_out=check_out,
            status=status,
            remarks=remarks,
        )
        return self._id

    def delete_by_id(self, attendance_id: int) -> bool:
        return self._by_id.pop(attendance_id, None) is not None

    def count(self) -> int:
        return len(self._by_id)

    def _row(self, r: AttendanceRecord) -> AttendanceRow:
        return AttendanceRow(
            attendance_id=r.attendance_id,
            employee_id=r.employee_id,
            employee_name=self._names.get(r.employee_id, ""),
            position=None,
            work_date=r.work_date,
            check_in=r.check_in,
            check_out=r.check_out,
            status=r.status,
            remarks=r.remarks,
        )

    def list_recent(self, *, limit=None):
        items = sorted(self._by_id.values(), key=lambda r: (r.work_date, r.check_in), reverse=True)
        return [self._row(r) for r in items[:limit]]

    def list_in_range(self, *, start_date, end_date, employee_id=None):
        items = [
            r
            for r in self._by_id.values()
            if start_date <= r.work_date <= end_date and (employee_id is None or r.employee_id == employee_id)
        ]
        items.sort(key=lambda r: (r.work_date, self._names.get(r.employee_id, "")))
        return [self._row(r) for r in items]


EMPLOYEES = {
    1: Employee(employee_id=1, name="Hashini Sewwandi", position="Web Developer"),
    2: Employee(employee_id=2, name="Kasun Dananjaya", position="Software Engineer"),
}


@pytest.fixture
def repo() -> InMemoryAttendance:
    return InMemoryAttendance({k: v.name for k, v in EMPLOYEES.items()})


@pytest.fixture
def svc(repo) -> AttendanceService:
    return AttendanceService(repo, InMemoryEmployees(dict(EMPLOYEES)))


def test_record_moves_times_onto_the_work_date(svc, repo, fixed_now):
    work_date = date(2026, 3, 4)
    svc.record(
        AttendanceEntry(employee_id=1, work_date=work_date, check_in=time(8, 0), check_out=time(17, 0)),
        now=fixed_now,
    )

    rec = repo.get_for_employee_and_date(1, work_date)
    assert rec is not None
    assert rec.check_in == datetime(2026, 3, 4, 8, 0)
    assert rec.check_out == datetime(2026, 3, 4, 17, 0)
    assert rec.check_in.date() == rec.check_out.date() == rec.work_date


@pytest.mark.parametrize(
    "check_in, expected",
    [
        (time(7, 55), AttendanceStatus.PRESENT),
        (time(8, 30, 0), AttendanceStatus.PRESENT),
        (time(8, 30, 1), AttendanceStatus.LATE),
        (time(11, 0), AttendanceStatus.LATE),
    ],
)
def test_status_derived_from_check_in_time(svc, repo, fixed_now, check_in, expected):
    svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4), check_in=check_in), now=fixed_now)

    assert repo.get_for_employee_and_date(1, date(2026, 3, 4)).status == expected


def test_caller_status_is_ignored(svc, repo, fixed_now):
    svc.record(
        AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4), check_in=time(9, 0), status="Absent"),
        now=fixed_now,
    )

    assert repo.get_for_employee_and_date(1, date(2026, 3, 4)).status == AttendanceStatus.LATE


def test_defaults_to_today_and_half_past_eight(svc, repo, fixed_now):
    attendance_id = svc.record(AttendanceEntry(employee_id="2"), now=fixed_now)

    rec = repo.get_by_id(attendance_id)
    assert rec.work_date == fixed_now.date()
    assert rec.check_in == datetime(2026, 2, 2, 8, 30)
    assert rec.check_out is None
    assert rec.status == AttendanceStatus.PRESENT


def test_unknown_employee_is_rejected(svc, repo, fixed_now):
    with pytest.raises(ValidationError) as exc:
        svc.record(AttendanceEntry(employee_id=99, work_date=date(2026, 3, 4)), now=fixed_now)

    assert exc.value.field == "employee_id"
    assert repo.count() == 0


def test_missing_employee_is_rejected(svc, fixed_now):
    with pytest.raises(ValidationError):
        svc.record(AttendanceEntry(employee_id=""), now=fixed_now)


def test_second_entry_same_day_conflicts(svc, repo, fixed_now):
    entry = AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4), check_in=time(8, 10))
    svc.record(entry, now=fixed_now)

    with pytest.raises(ConflictError):
        svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4), check_in=time(9, 0)), now=fixed_now)

    assert repo.count() == 1
    assert repo.get_for_employee_and_date(1, date(2026, 3, 4)).check_in.time() == time(8, 10)


def test_check_out_before_check_in_is_rejected(svc, repo, fixed_now):
    with pytest.raises(ValidationError) as exc:
        svc.record(
            AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4), check_in=time(9, 0), check_out=time(8, 0)),
            now=fixed_now,
        )

    assert exc.value.field == "check_out"
    assert repo.count() == 0


def test_remarks_are_trimmed_and_limited(svc, repo, fixed_now):
    attendance_id = svc.record(AttendanceEntry(employee_id=1, remarks="  doctor visit  "), now=fixed_now)
    assert repo.get_by_id(attendance_id).remarks == "doctor visit"

    with pytest.raises(ValidationError):
        svc.record(AttendanceEntry(employee_id=2, remarks="x" * 501), now=fixed_now)


def test_delete_missing_record_leaves_store_unchanged(svc, repo, fixed_now):
    svc.record(AttendanceEntry(employee_id=1), now=fixed_now)

    with pytest.raises(NotFoundError):
        svc.delete(42)

    assert repo.count() == 1


def test_delete_existing_record(svc, repo, fixed_now):
    attendance_id = svc.record(AttendanceEntry(employee_id=1), now=fixed_now)

    svc.delete(attendance_id)

    assert repo.count() == 0


def test_history_is_newest_first(svc, fixed_now):
    svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 1, 5)), now=fixed_now)
    svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 1, 7), check_in=time(9, 1)), now=fixed_now)

    history = svc.get_history_ui()

    assert [h["date"] for h in history] == ["2026-01-07", "2026-01-05"]
    assert history[0]["status"] == "Late"
    assert history[0]["check_out"] == "-"


def test_calendar_places_entries_on_their_day(svc, fixed_now):
    svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4)), now=fixed_now)
    svc.record(AttendanceEntry(employee_id=2, work_date=date(2026, 3, 4)), now=fixed_now)

    cal = svc.build_calendar(2026, 3)

    assert cal.title == "March 2026"
    days = {d.day: d for week in cal.weeks for d in week}
    assert len(days[date(2026, 3, 4)].entries) == 2
    assert days[date(2026, 3, 5)].entries == ()
    # March 2026 starts on a Sunday; the grid starts on Monday 23 Feb.
    assert cal.weeks[0][0].day == date(2026, 2, 23)
    assert not cal.weeks[0][0].in_month


def test_calendar_filters_by_employee(svc, fixed_now):
    svc.record(AttendanceEntry(employee_id=1, work_date=date(2026, 3, 4)), now=fixed_now)
    svc.record(AttendanceEntry(employee_id=2, work_date=date(2026, 3, 4)), now=fixed_now)

    cal = svc.build_calendar(2026, 3, employee_id=2)

    entries = [e for week in cal.weeks for d in week for e in d.entries]
    assert [e["employee_name"] for e in entries] == ["Kasun Dananjaya"]


def test_calendar_rejects_invalid_month(svc):
    with pytest.raises(ValidationError):
        svc.build_calendar(2026, 13)


def test_calendar_rejects_grid_past_last_supported_date(svc):
    with pytest.raises(ValidationError) as exc:
        svc.build_calendar(9999, 12)

    assert exc.value.field == "month"
