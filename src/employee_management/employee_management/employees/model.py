from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional

from ..core.constants import SALARY_QUANTUM


def round_salary(value: Decimal) -> Decimal:
    """Round to cents the way the DECIMAL(12,2) column does (half away from zero)."""
    return Decimal(value).quantize(Decimal(SALARY_QUANTUM), rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    Plain data object (no database access). ``id`` is None until the row has
    been saved; every other field defaults to its empty value so that
    ``Employee()`` is the blank entity behind the "new" form.
    """

    id: Optional[int] = None
    name: str = ""
    email: str = ""
    position: str = ""
    department: str = ""
    salary: Decimal = Decimal("0")

    @property
    def is_new(self) -> bool:
        return self.id is None
