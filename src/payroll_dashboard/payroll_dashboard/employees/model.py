from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..core.enums import EmployeeStatus, EmployeeType


@dataclass(frozen=True)
class ContractualEmployee:
    """Domain entity: employee paid per recorded unit of work.

    Note: Plain data object (no DB access code).
    """

    employee_id: int
    first_name: str
    last_name: str
    phone: str
    role: str
    hire_date: date
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    notes: Optional[str] = None

    @property
    def employee_type(self) -> EmployeeType:
        return EmployeeType.CONTRACTUAL

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE


@dataclass(frozen=True)
class FixedEmployee:
    """Domain entity: employee on a recurring monthly salary (plus overtime)."""

    employee_id: int
    first_name: str
    last_name: str
    phone: str
    role: str
    hire_date: date
    monthly_salary: float
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    notes: Optional[str] = None

    @property
    def employee_type(self) -> EmployeeType:
        return EmployeeType.FIXED

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def is_active(self) -> bool:
        return self.status == EmployeeStatus.ACTIVE


Employee = Union[ContractualEmployee, FixedEmployee]


@dataclass(frozen=True)
class NewEmployee:
    """Validated input for creating or editing an employee."""

    first_name: str
    last_name: str
    phone: str
    role: str
    employee_type: EmployeeType
    hire_date: date
    monthly_salary: Optional[float] = None
    status: EmployeeStatus = EmployeeStatus.ACTIVE
    notes: Optional[str] = None
