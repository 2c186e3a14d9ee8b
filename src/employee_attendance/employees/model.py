from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object, no database access.
    """

    employee_id: int
    name: str
    position: Optional[str]
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    join_date: Optional[date] = None

    @property
    def label(self) -> str:
        return f"{self.name} ({self.position})" if self.position else self.name
