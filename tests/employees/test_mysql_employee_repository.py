from __future__ import annotations

from decimal import Decimal

import pytest

from src.employee_management.employee_management.employees.model import Employee
from src.employee_management.employee_management.employees.mysql_employee_repository import MySQLEmployeeRepository


class FakeCursor:
    def __init__(self, conn):
        self._conn = conn
        self.lastrowid = None
        self.rowcount = 0
        self.closed = False

    def execute(self, sql, params=None):
        self._conn.executed.append((" ".join(sql.split()), params))
        if self._conn.fail_with is not None:
            raise self._conn.fail_with
        self.lastrowid = self._conn.next_lastrowid
        self.rowcount = self._conn.next_rowcount

    def fetchone(self):
        return self._conn.rows[0] if self._conn.rows else None

    def fetchall(self):
        return list(self._conn.rows)

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self):
        self.executed = []
        self.rows = []
        self.next_lastrowid = None
        self.next_rowcount = 0
        self.fail_with = None
        self.commits = 0
        self.rollbacks = 0
        self.closed = 0

    def cursor(self, dictionary=False):
        assert dictionary
        return FakeCursor(self)

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        self.closed += 1


class FakeConnFactory:
    def __init__(self):
        self.conn = FakeConnection()
        self.released = 0

    def connect(self):
        return self.conn

    def release(self):
        self.released += 1


@pytest.fixture
def factory():
    return FakeConnFactory()


def test_find_all_orders_by_id_and_maps_rows(factory):
    factory.conn.rows = [
        {"id": 1, "name": "Alice", "email": None, "position": "Dev", "department": "Eng", "salary": Decimal("10.50")},
        {"id": 2, "name": "Bob", "email": "b@x.io", "position": "", "department": "Ops", "salary": None},
    ]
    repo = MySQLEmployeeRepository(factory)

    rows = repo.find_all()

    assert factory.conn.executed[0][0].endswith("FROM employee ORDER BY id ASC")
    assert rows == [
        Employee(id=1, name="Alice", email="", position="Dev", department="Eng", salary=Decimal("10.50")),
        Employee(id=2, name="Bob", email="b@x.io", position="", department="Ops", salary=Decimal("0")),
    ]
    assert factory.conn.commits == 1
    assert factory.conn.closed == 1


def test_find_by_id_missing_returns_none(factory):
    repo = MySQLEmployeeRepository(factory)

    assert repo.find_by_id(5) is None
    assert factory.conn.executed[0][1] == (5,)


def test_save_new_inserts_and_returns_assigned_id(factory):
    factory.conn.next_lastrowid = 12
    repo = MySQLEmployeeRepository(factory)

    saved = repo.save(Employee(name="Alice", department="Eng", salary=Decimal("1")))

    sql, params = factory.conn.executed[0]
    assert sql.startswith("INSERT INTO employee(name, email, position, department, salary)")
    assert params == ("Alice", "", "", "Eng", Decimal("1"))
    assert saved == Employee(id=12, name="Alice", department="Eng", salary=Decimal("1"))


def test_save_existing_upserts_by_id(factory):
    repo = MySQLEmployeeRepository(factory)
    employee = Employee(id=3, name="Alicia")

    assert repo.save(employee) == employee

    sql, params = factory.conn.executed[0]
    assert sql.startswith("INSERT INTO employee(id, name, email, position, department, salary)")
    assert "ON DUPLICATE KEY UPDATE" in sql
    assert params == (3, "Alicia", "", "", "", Decimal("0"))


@pytest.mark.parametrize("rowcount, expected", [(1, True), (0, False)])
def test_delete_reports_whether_a_row_went_away(factory, rowcount, expected):
    factory.conn.next_rowcount = rowcount
    repo = MySQLEmployeeRepository(factory)

    assert repo.delete_by_id(9) is expected
    assert factory.conn.executed[0] == ("DELETE FROM employee WHERE id=%s", (9,))


def test_store_error_rolls_back_releases_and_propagates(factory):
    factory.conn.fail_with = RuntimeError("lost connection")
    repo = MySQLEmployeeRepository(factory)

    with pytest.raises(RuntimeError):
        repo.find_all()

    assert factory.conn.rollbacks == 1
    assert factory.conn.commits == 0
    assert factory.conn.closed == 1
    assert factory.released == 1


def test_save_returns_salary_as_the_column_stores_it(factory):
    factory.conn.next_lastrowid = 4
    repo = MySQLEmployeeRepository(factory)

    saved = repo.save(Employee(name="Alice", salary=Decimal("1.005")))

    assert saved.salary == Decimal("1.01")
    assert factory.conn.executed[0][1][-1] == Decimal("1.01")
