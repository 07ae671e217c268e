from __future__ import annotations

import threading
from dataclasses import replace
from typing import Optional

import pytest

from src.employee_management.employee_management.container import build_container_for
from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.main import create_app


class InMemoryEmployees:
    """EmployeeRepository over a dict, with store-assigned ids."""

    def __init__(self):
        self._rows: dict[int, Employee] = {}
        self._next_id = 1
        self._lock = threading.Lock()

    def find_all(self):
        with self._lock:
            return [self._rows[k] for k in sorted(self._rows)]

    def save(self, employee: Employee) -> Employee:
        with self._lock:
            if employee.id is None:
                employee = replace(employee, id=self._next_id)
            self._next_id = max(self._next_id, employee.id + 1)
            self._rows[employee.id] = employee
            return employee

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with self._lock:
            return self._rows.get(employee_id)

    def delete_by_id(self, employee_id: int) -> bool:
        with self._lock:
            return self._rows.pop(employee_id, None) is not None


@pytest.fixture
def employees_repo():
    return InMemoryEmployees()


@pytest.fixture
def app(monkeypatch, employees_repo):
    monkeypatch.setenv("APP_ENV", "testing")
    return create_app(container=build_container_for(employees_repo))


@pytest.fixture
def client(app):
    return app.test_client()
