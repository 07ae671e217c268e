from __future__ import annotations

import logging
from typing import Optional, Sequence

from .model import Employee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


class EmployeeService:
    """Use case: manage employee records.

    Pass-through over the repository. The only adjustment is that a missing
    employee comes back as ``None`` from :meth:`get_employee_by_id`.
    """

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_all_employees(self) -> Sequence[Employee]:
        return self._employees.find_all()

    def save_employee(self, employee: Employee) -> Employee:
        saved = self._employees.save(employee)
        logger.info("%s employee id=%s", "Created" if employee.is_new else "Updated", saved.id)
        return saved

    def get_employee_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._employees.find_by_id(int(employee_id))

    def delete_employee(self, employee_id: int) -> None:
        if not self._employees.delete_by_id(int(employee_id)):
            logger.info("Delete requested for missing employee id=%s", employee_id)
