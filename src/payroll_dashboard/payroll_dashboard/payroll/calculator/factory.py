from __future__ import annotations

from dataclasses import dataclass

from ...core.enums import EmployeeType
from ...employees.model import Employee
from .base import BalanceCalculator
from .contractual_calculator import ContractualBalanceCalculator
from .fixed_calculator import FixedBalanceCalculator


@dataclass
class BalanceCalculatorFactory:
    """Factory Pattern: choose the calculator for the employee's compensation basis."""

    def for_employee(self, employee: Employee) -> BalanceCalculator:
        if employee.employee_type == EmployeeType.FIXED:
            return FixedBalanceCalculator()
        return ContractualBalanceCalculator()
