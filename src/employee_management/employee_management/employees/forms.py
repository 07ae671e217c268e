from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Mapping, Optional

from ..core.constants import MAX_EMPLOYEE_ID, SALARY_LIMIT
from ..core.exceptions import ValidationError
from .model import Employee, round_salary

TEXT_FIELDS = ("name", "email", "position", "department")


def _text(form: Mapping[str, str], field: str) -> str:
    return (form.get(field) or "").strip()


def parse_id(raw: Optional[str]) -> Optional[int]:
    """Blank means a new employee; anything else must be a positive BIGINT."""
    raw = (raw or "").strip()
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        raise ValidationError(f"Invalid id: {raw!r}")
    if not 0 < value <= MAX_EMPLOYEE_ID:
        raise ValidationError(f"Invalid id: {raw!r}")
    return value


def parse_salary(raw: Optional[str]) -> Decimal:
    """Parse a salary as the column stores it: rounded to cents, below 1e10."""
    raw = (raw or "").strip()
    if not raw:
        return Decimal("0")
    try:
        value = Decimal(raw)
    except InvalidOperation:
        raise ValidationError(f"Invalid salary: {raw!r}")
    if not value.is_finite() or abs(value) >= Decimal(SALARY_LIMIT):
        raise ValidationError(f"Invalid salary: {raw!r}")
    value = round_salary(value)
    if abs(value) >= Decimal(SALARY_LIMIT):
        raise ValidationError(f"Invalid salary: {raw!r}")
    return value


def bind_employee(form: Mapping[str, str]) -> Employee:
    """Build an Employee from submitted form fields.

    Field names map one-to-one onto attributes; unknown fields are ignored and
    missing ones take the attribute's empty value.
    """
    return Employee(
        id=parse_id(form.get("id")),
        salary=parse_salary(form.get("salary")),
        **{field: _text(form, field) for field in TEXT_FIELDS},
    )
