from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional


@dataclass(frozen=True)
class WorkRecord:
    """Unit of work logged for a contractual employee.

    `quantity` is None for lump-sum entries; the line then counts once at `price`.
    """

    employee_id: int
    work_date: date
    description: str
    quantity: Optional[float]
    price: float
    total: float
    record_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.work_date

    @property
    def effective_quantity(self) -> float:
        return 1.0 if self.quantity is None else self.quantity


@dataclass(frozen=True)
class OvertimeRecord:
    """Extra hours paid to a fixed-salary employee on top of the monthly salary."""

    employee_id: int
    work_date: date
    hours: Optional[float]
    rate: float
    amount: float
    description: Optional[str] = None
    record_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.work_date

    @property
    def effective_hours(self) -> float:
        return 1.0 if self.hours is None else self.hours


@dataclass(frozen=True)
class SalaryPayment:
    employee_id: int
    amount: float
    payment_date: date
    notes: Optional[str] = None
    payment_type: Optional[str] = None
    month: Optional[str] = None
    work_record_ids: tuple[int, ...] = ()
    is_advance_deduction: bool = False
    payment_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.payment_date


@dataclass(frozen=True)
class Advance:
    """Money handed out ahead of earnings.

    Kept on the ledger and listed on reports; it does not enter balance totals.
    """

    employee_id: int
    amount: float
    payment_date: date
    reason: Optional[str] = None
    notes: Optional[str] = None
    advance_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.payment_date

