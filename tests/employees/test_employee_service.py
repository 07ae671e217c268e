from __future__ import annotations

from decimal import Decimal

from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.employees.service import EmployeeService


def test_save_new_employee_assigns_id_and_round_trips(employees_repo):
    svc = EmployeeService(employees_repo)

    saved = svc.save_employee(Employee(name="Alice", department="Eng", salary=Decimal("100")))

    assert saved.id is not None
    assert svc.get_employee_by_id(saved.id) == saved


def test_save_existing_employee_replaces_fields(employees_repo):
    svc = EmployeeService(employees_repo)
    saved = svc.save_employee(Employee(name="Alice", department="Eng"))

    svc.save_employee(Employee(id=saved.id, name="Alicia", department="Ops"))

    assert svc.get_employee_by_id(saved.id) == Employee(id=saved.id, name="Alicia", department="Ops")
    assert len(svc.get_all_employees()) == 1


def test_get_missing_employee_returns_none(employees_repo):
    svc = EmployeeService(employees_repo)

    assert svc.get_employee_by_id(42) is None


def test_delete_removes_row(employees_repo):
    svc = EmployeeService(employees_repo)
    saved = svc.save_employee(Employee(name="Alice"))

    svc.delete_employee(saved.id)

    assert svc.get_employee_by_id(saved.id) is None


def test_delete_missing_employee_is_a_no_op(employees_repo):
    svc = EmployeeService(employees_repo)
    svc.save_employee(Employee(name="Alice"))

    svc.delete_employee(99999)

    assert [e.name for e in svc.get_all_employees()] == ["Alice"]


def test_get_all_returns_each_persisted_row_once_in_id_order(employees_repo):
    svc = EmployeeService(employees_repo)
    a = svc.save_employee(Employee(name="A"))
    b = svc.save_employee(Employee(name="B"))
    c = svc.save_employee(Employee(name="C"))
    svc.delete_employee(b.id)
    svc.save_employee(Employee(id=a.id, name="A2"))

    rows = svc.get_all_employees()

    assert [e.id for e in rows] == [a.id, c.id]
    assert [e.name for e in rows] == ["A2", "C"]


def test_new_employee_is_blank():
    e = Employee()

    assert e.is_new
    assert (e.name, e.email, e.position, e.department, e.salary) == ("", "", "", "", Decimal("0"))
