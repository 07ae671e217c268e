from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_DB_PORT, DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    employees_repo: EmployeeRepository

    employee_service: EmployeeService


def build_container(*, db_config: dict) -> Container:
    config = DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", DEFAULT_DB_PORT)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )
    conn = DatabaseConnection.get_instance(config)

    employees_repo = MySQLEmployeeRepository(conn)
    employee_service = EmployeeService(employees_repo)

    return Container(
        conn=conn,
        employees_repo=employees_repo,
        employee_service=employee_service,
    )


def build_container_for(repository: EmployeeRepository) -> Container:
    """Wire the service over an already-built repository (no pool)."""
    return Container(conn=None, employees_repo=repository, employee_service=EmployeeService(repository))
