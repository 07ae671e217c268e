from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee


class EmployeeRepository(Protocol):
    """Repository interface for Employee.

    The service layer depends on this interface, not on a concrete database.
    """

    def find_all(self) -> Sequence[Employee]:
        """Every stored employee, ascending by id."""

        raise NotImplementedError

    def save(self, employee: Employee) -> Employee:
        """Insert when ``employee.id`` is None, otherwise update that row.

        Returns the stored entity, carrying its id.
        """

        raise NotImplementedError

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        raise NotImplementedError

    def delete_by_id(self, employee_id: int) -> bool:
        raise NotImplementedError
