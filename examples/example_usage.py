"""Example: use the service layer directly (no Flask).

Controllers are a thin layer; everything they do is reachable from the container.
"""

import importlib

from config import get_settings_module

from src.employee_management.employee_management.container import build_container


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(db_config=settings.DB_CONFIG)
    for employee in container.employee_service.get_all_employees():
        print(employee.id, employee.name, employee.department)


if __name__ == "__main__":
    main()
