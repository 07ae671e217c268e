"""Constants and defaults."""

DEFAULT_DB_PORT = 3306
DEFAULT_POOL_SIZE = 5
POOL_NAME = "employee_management"

# employee.id is BIGINT
MAX_EMPLOYEE_ID = 2**63 - 1
# employee.salary is DECIMAL(12,2)
SALARY_QUANTUM = "0.01"
SALARY_LIMIT = "1e10"
