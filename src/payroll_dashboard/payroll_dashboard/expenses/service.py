from __future__ import annotations

import logging
from dataclasses import replace
from datetime import datetime
from typing import Any, Mapping, Optional, Sequence

from ..common.validators import optional_text, require_amount, require_choice, require_date, require_non_empty
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import ExpenseCategory, ExpenseStatus
from ..core.exceptions import DataInconsistencyError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.engine import DateRange, filter_by_date_range, sum_amounts
from .model import Expense
from .repository import ExpenseRepository

logger = logging.getLogger(__name__)

_OPEN_STATUSES = {ExpenseStatus.DRAFT, ExpenseStatus.SUBMITTED}


def _optional_id(value: Any, field_name: str) -> Optional[int]:
    if value is None or (isinstance(value, str) and not value.strip()):
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be an id", field=field_name)


def validate_expense(data: Mapping[str, Any], *, default_currency: str = DEFAULT_CURRENCY) -> Expense:
    currency = optional_text(data.get("currency")) or default_currency
    status = data.get("status") or ExpenseStatus.SUBMITTED
    return Expense(
        amount=require_amount(data.get("amount"), "amount"),
        currency=currency.upper(),
        category=require_choice(data.get("category"), ExpenseCategory, "category"),
        status=require_choice(status, ExpenseStatus, "status"),
        description=require_non_empty(data.get("description"), "description"),
        expense_date=require_date(data.get("date") or data.get("expense_date"), "date"),
        employee_id=_optional_id(data.get("employee_id"), "employee_id"),
    )


class ExpenseService:
    """Use case: expense claims and their approval flow."""

    def __init__(
        self,
        expenses: ExpenseRepository,
        employees: Optional[EmployeeRepository] = None,
        *,
        default_currency: str = DEFAULT_CURRENCY,
    ):
        self._expenses = expenses
        self._employees = employees
        self._currency = default_currency

    def _check_employee(self, expense: Expense) -> None:
        if expense.employee_id is None or self._employees is None:
            return
        if not self._employees.get_by_id(expense.employee_id):
            raise DataInconsistencyError(f"Employee {expense.employee_id} not found")

    def get_expense(self, expense_id: int) -> Expense:
        expense = self._expenses.get_by_id(int(expense_id))
        if not expense:
            raise DataInconsistencyError(f"Expense {expense_id} not found")
        return expense

    def create_expense(self, data: Mapping[str, Any]) -> int:
        expense = validate_expense(data, default_currency=self._currency)
        self._check_employee(expense)
        expense_id = self._expenses.create(expense)
        logger.info("Expense %s created (%s %s, %s)", expense_id, expense.amount, expense.currency, expense.category.value)
        return expense_id

    def update_expense(self, expense_id: int, data: Mapping[str, Any]) -> None:
        existing = self.get_expense(expense_id)
        changed = validate_expense(data, default_currency=existing.currency)
        self._check_employee(changed)
        updated = replace(
            changed,
            expense_id=existing.expense_id,
            approved_by=existing.approved_by,
            approved_at=existing.approved_at,
            rejection_reason=existing.rejection_reason,
        )
        if not self._expenses.update(updated):
            raise ValidationError("Expense update failed")
        logger.info("Expense %s updated", expense_id)

    def delete_expense(self, expense_id: int) -> None:
        if not self._expenses.delete_by_id(int(expense_id)):
            raise DataInconsistencyError(f"Expense {expense_id} not found")
        logger.info("Expense %s deleted", expense_id)

    def approve(self, expense_id: int, *, approved_by: str, now: datetime) -> None:
        expense = self.get_expense(expense_id)
        if expense.status not in _OPEN_STATUSES:
            raise ValidationError(f"Expense {expense_id} is already {expense.status.value}")

        approver = require_non_empty(approved_by, "approved_by")
        approved = replace(
            expense, status=ExpenseStatus.APPROVED, approved_by=approver, approved_at=now, rejection_reason=None
        )
        if not self._expenses.update(approved):
            raise ValidationError("Expense approval failed")
        logger.info("Expense %s approved by %s", expense_id, approver)

    def reject(self, expense_id: int, *, reason: str) -> None:
        expense = self.get_expense(expense_id)
        if expense.status not in _OPEN_STATUSES:
            raise ValidationError(f"Expense {expense_id} is already {expense.status.value}")

        reason = require_non_empty(reason, "reason")
        if not self._expenses.update(replace(expense, status=ExpenseStatus.REJECTED, rejection_reason=reason)):
            raise ValidationError("Expense rejection failed")
        logger.info("Expense %s rejected: %s", expense_id, reason)

    def list_expenses(
        self,
        *,
        date_range: Optional[DateRange] = None,
        category: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Sequence[Expense]:
        date_range = date_range or DateRange()
        rows = filter_by_date_range(self._expenses.list_all(), date_range.start, date_range.end)
        if category:
            wanted_category = require_choice(category, ExpenseCategory, "category")
            rows = [e for e in rows if e.category == wanted_category]
        if status:
            wanted_status = require_choice(status, ExpenseStatus, "status")
            rows = [e for e in rows if e.status == wanted_status]
        return rows

    def expense_stats(self, *, date_range: Optional[DateRange] = None) -> dict:
        rows = self.list_expenses(date_range=date_range)

        def total(status: ExpenseStatus) -> float:
            return sum_amounts(e for e in rows if e.status == status)

        return {
            "total_amount": sum_amounts(rows),
            "count": len(rows),
            "pending_amount": total(ExpenseStatus.SUBMITTED),
            "approved_amount": total(ExpenseStatus.APPROVED),
            "rejected_amount": total(ExpenseStatus.REJECTED),
            "by_category": {
                c.value: sum_amounts(e for e in rows if e.category == c) for c in ExpenseCategory
            },
        }
