from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, time

from .strategies.base import AttendanceStrategy
from .strategies.late_strategy import LateStrategy
from .strategies.present_strategy import PresentStrategy


@dataclass
class AttendanceStrategyFactory:
    """Factory Pattern: choose appropriate strategy based on rules."""

    def for_checkin(self, *, check_in: datetime, workday_start: time) -> AttendanceStrategy:
        # Exactly at the start time still counts as present.
        if check_in.time() > workday_start:
            return LateStrategy()
        return PresentStrategy()
