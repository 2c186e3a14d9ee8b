from __future__ import annotations

from .repository import EmployeeRepository


class EmployeeService:
    """Use case: read employees for forms and filters."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def dropdown_options(self) -> list[tuple[int, str]]:
        return [(e.employee_id, e.label) for e in self._employees.list_all()]

    def count(self) -> int:
        return self._employees.count()
