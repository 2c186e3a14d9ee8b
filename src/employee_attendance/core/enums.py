from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance classification stored in the database."""

    PRESENT = "Present"
    LATE = "Late"
    ABSENT = "Absent"
    # Stored text no other member matches; counted in no bucket.
    UNKNOWN = "Unknown"

    @classmethod
    def _missing_(cls, value):
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.strip().lower():
                    return member
        return cls.UNKNOWN

    @property
    def counts_as_present(self) -> bool:
        return self in (AttendanceStatus.PRESENT, AttendanceStatus.LATE)


class ExportFormat(str, Enum):
    CSV = "csv"
    EXCEL = "excel"
