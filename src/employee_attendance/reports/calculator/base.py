from __future__ import annotations

from abc import ABC, abstractmethod

from ...attendance.model import AttendanceRow


class WorkedHoursCalculator(ABC):
    """Calculator interface (Strategy Pattern for worked time)."""

    @abstractmethod
    def worked_hours(self, row: AttendanceRow) -> float:
        raise NotImplementedError
