from __future__ import annotations

import logging
from dataclasses import replace
from decimal import Decimal
from typing import Any, Dict, Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee, round_salary
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)

_COLUMNS = "id, name, email, position, department, salary"


def _row_to_employee(row: Dict[str, Any]) -> Employee:
    salary = row.get("salary")
    return Employee(
        id=int(row["id"]),
        name=row.get("name") or "",
        email=row.get("email") or "",
        position=row.get("position") or "",
        department=row.get("department") or "",
        salary=Decimal(str(salary)) if salary is not None else Decimal("0"),
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def find_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee ORDER BY id ASC")
            return [_row_to_employee(r) for r in fetchall(cur)]

    def find_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employee WHERE id=%s", (int(employee_id),))
            row = fetchone(cur)
            if not row:
                return None
            return _row_to_employee(row)

    def save(self, employee: Employee) -> Employee:
        # Return what the row will hold, not what was passed in.
        employee = replace(employee, salary=round_salary(employee.salary))
        values = (employee.name, employee.email, employee.position, employee.department, employee.salary)

        with db_cursor(self._conn_factory) as (_, cur):
            if employee.id is None:
                cur.execute(
                    """
                    INSERT INTO employee(name, email, position, department, salary)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    values,
                )
                saved = replace(employee, id=int(cur.lastrowid))
                logger.info("Inserted employee id=%s", saved.id)
                return saved

            # An id that is not in the table is inserted under that id.
            cur.execute(
                """
                INSERT INTO employee(id, name, email, position, department, salary)
                VALUES(%s,%s,%s,%s,%s,%s)
                ON DUPLICATE KEY UPDATE
                    name=VALUES(name),
                    email=VALUES(email),
                    position=VALUES(position),
                    department=VALUES(department),
                    salary=VALUES(salary)
                """,
                (int(employee.id),) + values,
            )
            logger.info("Saved employee id=%s", employee.id)
            return employee

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee WHERE id=%s", (int(employee_id),))
            deleted = cur.rowcount > 0
            logger.info("Deleted employee id=%s (found=%s)", employee_id, deleted)
            return deleted
