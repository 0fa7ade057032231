from __future__ import annotations

import logging
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_text, require_amount, require_choice, require_date, require_non_empty
from ..core.enums import EmployeeStatus, EmployeeType
from ..core.exceptions import DataInconsistencyError, ValidationError
from .model import Employee, FixedEmployee, NewEmployee
from .repository import EmployeeRepository

logger = logging.getLogger(__name__)


def validate_employee(data: Mapping[str, Any]) -> NewEmployee:
    """Turn raw form/JSON fields into a `NewEmployee`.

    `monthly_salary` is required for fixed employees and dropped for contractual ones.
    """

    employee_type = require_choice(data.get("employee_type") or data.get("type"), EmployeeType, "employee_type")
    monthly_salary = None
    if employee_type == EmployeeType.FIXED:
        monthly_salary = require_amount(data.get("monthly_salary"), "monthly_salary")

    status = data.get("status") or EmployeeStatus.ACTIVE
    return NewEmployee(
        first_name=require_non_empty(data.get("first_name"), "first_name"),
        last_name=require_non_empty(data.get("last_name"), "last_name"),
        phone=require_non_empty(data.get("phone"), "phone"),
        role=require_non_empty(data.get("role"), "role"),
        employee_type=employee_type,
        hire_date=require_date(data.get("hire_date"), "hire_date"),
        monthly_salary=monthly_salary,
        status=require_choice(status, EmployeeStatus, "status"),
        notes=optional_text(data.get("notes")),
    )


class EmployeeService:
    """Use case: maintain the employee roster."""

    def __init__(self, employees: EmployeeRepository):
        self._employees = employees

    def get_employee(self, employee_id: int) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise DataInconsistencyError(f"Employee {employee_id} not found")
        return employee

    def list_employees(self, *, employee_type: Optional[str] = None) -> Sequence[Employee]:
        kind = require_choice(employee_type, EmployeeType, "employee_type") if employee_type else None
        return self._employees.list_all(employee_type=kind)

    def add_employee(self, data: Mapping[str, Any]) -> int:
        new = validate_employee(data)
        employee_id = self._employees.create(new)
        logger.info("Added %s employee %s (%s %s)", new.employee_type.value, employee_id, new.first_name, new.last_name)
        return employee_id

    def edit_employee(self, employee_id: int, data: Mapping[str, Any]) -> None:
        self.get_employee(employee_id)
        new = validate_employee(data)
        if not self._employees.update(int(employee_id), new):
            raise ValidationError("Employee update failed")
        logger.info("Updated employee %s", employee_id)

    def set_status(self, employee_id: int, status: Any) -> None:
        self.get_employee(employee_id)
        new_status = require_choice(status, EmployeeStatus, "status")
        self._employees.set_status(int(employee_id), status=new_status)
        logger.info("Employee %s is now %s", employee_id, new_status.value)

    def delete_employee(self, employee_id: int) -> None:
        self.get_employee(employee_id)
        if not self._employees.delete_by_id(int(employee_id)):
            raise ValidationError("Employee delete failed")
        logger.info("Deleted employee %s", employee_id)

    def employee_stats(self) -> dict:
        employees = list(self._employees.list_all())
        active = [e for e in employees if e.is_active]
        return {
            "total": len(employees),
            "active": len(active),
            "inactive": len(employees) - len(active),
            "contractual": sum(1 for e in employees if e.employee_type == EmployeeType.CONTRACTUAL),
            "fixed": sum(1 for e in employees if e.employee_type == EmployeeType.FIXED),
            "total_fixed_salaries": sum(e.monthly_salary for e in active if isinstance(e, FixedEmployee)),
        }
