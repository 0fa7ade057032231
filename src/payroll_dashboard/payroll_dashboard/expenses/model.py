from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import ExpenseCategory, ExpenseStatus


@dataclass(frozen=True)
class Expense:
    """Company expense claim, optionally tied to an employee."""

    amount: float
    currency: str
    category: ExpenseCategory
    description: str
    expense_date: date
    status: ExpenseStatus = ExpenseStatus.SUBMITTED
    employee_id: Optional[int] = None
    approved_by: Optional[str] = None
    approved_at: Optional[datetime] = None
    rejection_reason: Optional[str] = None
    expense_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.expense_date
