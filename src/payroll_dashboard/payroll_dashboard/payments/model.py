from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import PaymentMethod, PaymentStatus, PaymentType


@dataclass(frozen=True)
class Payment:
    """Company-level pay-in or pay-out, separate from employee salary payments."""

    amount: float
    currency: str
    payment_type: PaymentType
    description: str
    reference: str
    payment_date: date
    status: PaymentStatus = PaymentStatus.COMPLETED
    method: PaymentMethod = PaymentMethod.BANK_TRANSFER
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    customer_email: Optional[str] = None
    transaction_fee: Optional[float] = None
    payment_id: Optional[int] = None

    @property
    def record_date(self) -> date:
        return self.payment_date

    @property
    def net_amount(self) -> float:
        return self.amount - (self.transaction_fee or 0.0)
