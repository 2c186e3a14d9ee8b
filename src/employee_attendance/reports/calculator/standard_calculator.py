from __future__ import annotations

from ...attendance.model import AttendanceRow
from ...common.datetime_utils import hours_between
from .base import WorkedHoursCalculator


class StandardWorkedHoursCalculator(WorkedHoursCalculator):
    """Standard rule: out - in, not below 0. No check-out counts as 0."""

    def worked_hours(self, row: AttendanceRow) -> float:
        if not row.check_out:
            return 0.0
        return max(hours_between(row.check_in, row.check_out), 0.0)
