from __future__ import annotations

from datetime import datetime, time

from ...core.enums import AttendanceStatus
from .base import AttendanceStrategy, StatusDecision


class LateStrategy(AttendanceStrategy):
    """Late check-in."""

    def decide_checkin(self, *, check_in: datetime, workday_start: time) -> StatusDecision:
        return StatusDecision(status=AttendanceStatus.LATE)
