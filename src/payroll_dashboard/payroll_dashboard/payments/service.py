from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from datetime import date
from typing import Any, Callable, Mapping, Optional, Sequence

from ..common.validators import (
    optional_amount,
    optional_text,
    require_amount,
    require_choice,
    require_date,
    require_non_empty,
)
from ..core.constants import DEFAULT_CURRENCY
from ..core.enums import ExpenseStatus, PaymentMethod, PaymentStatus, PaymentType
from ..core.exceptions import DataInconsistencyError, InvalidNumberError, ValidationError
from ..expenses.repository import ExpenseRepository
from ..payroll.engine import DateRange, filter_by_date_range, sum_amounts
from .model import Payment
from .repository import PaymentRepository

logger = logging.getLogger(__name__)

# Dashboard forms say pay-in/pay-out; the store says credit/debit.
_TYPE_ALIASES = {"payin": "credit", "pay_in": "credit", "payout": "debit", "pay_out": "debit"}

# Never moved money, so they stay out of totals.
_VOID_STATUSES = {PaymentStatus.FAILED, PaymentStatus.CANCELLED}


def new_reference(payment_date: date) -> str:
    return f"PAY-{payment_date.year}-{uuid.uuid4().hex[:6].upper()}"


def _payment_type(value: Any) -> PaymentType:
    if isinstance(value, str):
        value = _TYPE_ALIASES.get(value.strip().lower(), value)
    return require_choice(value, PaymentType, "type")


def validate_payment(
    data: Mapping[str, Any],
    *,
    default_currency: str = DEFAULT_CURRENCY,
    reference: Optional[str] = None,
) -> Payment:
    amount = require_amount(data.get("amount"), "amount")
    if amount == 0:
        raise InvalidNumberError("amount must be greater than zero", field="amount")

    fee = optional_amount(data.get("transaction_fee"), "transaction_fee")
    if fee is not None and fee > amount:
        raise InvalidNumberError("transaction_fee cannot exceed amount", field="transaction_fee")

    currency = optional_text(data.get("currency")) or default_currency
    return Payment(
        amount=amount,
        currency=currency.upper(),
        payment_type=_payment_type(data.get("type") or data.get("payment_type")),
        description=require_non_empty(data.get("description"), "description"),
        reference=optional_text(data.get("reference")) or reference or "",
        payment_date=require_date(data.get("date") or data.get("payment_date"), "date"),
        status=require_choice(data.get("status") or PaymentStatus.COMPLETED, PaymentStatus, "status"),
        method=require_choice(data.get("method") or PaymentMethod.BANK_TRANSFER, PaymentMethod, "method"),
        customer_id=optional_text(data.get("customer_id")),
        customer_name=optional_text(data.get("customer_name")),
        customer_email=optional_text(data.get("customer_email")),
        transaction_fee=fee,
    )


class PaymentService:
    """Use case: company pay-ins and pay-outs, and the cash position they give with expenses."""

    def __init__(
        self,
        payments: PaymentRepository,
        *,
        expenses: Optional[ExpenseRepository] = None,
        default_currency: str = DEFAULT_CURRENCY,
        reference_factory: Callable[[date], str] = new_reference,
    ):
        self._payments = payments
        self._expenses = expenses
        self._currency = default_currency
        self._new_reference = reference_factory

    def get_payment(self, payment_id: int) -> Payment:
        payment = self._payments.get_by_id(int(payment_id))
        if not payment:
            raise DataInconsistencyError(f"Payment {payment_id} not found")
        return payment

    def list_payments(
        self,
        *,
        date_range: Optional[DateRange] = None,
        payment_type: Optional[str] = None,
        status: Optional[str] = None,
    ) -> Sequence[Payment]:
        date_range = date_range or DateRange()
        rows = filter_by_date_range(self._payments.list_all(), date_range.start, date_range.end)
        if payment_type:
            wanted_type = _payment_type(payment_type)
            rows = [p for p in rows if p.payment_type == wanted_type]
        if status:
            wanted_status = require_choice(status, PaymentStatus, "status")
            rows = [p for p in rows if p.status == wanted_status]
        return rows

    def create_payment(self, data: Mapping[str, Any]) -> int:
        payment = validate_payment(data, default_currency=self._currency)
        if not payment.reference:
            payment = replace(payment, reference=self._new_reference(payment.payment_date))
        payment_id = self._payments.create(payment)
        logger.info(
            "Payment %s recorded (%s %s %s, ref=%s)",
            payment_id, payment.payment_type.value, payment.amount, payment.currency, payment.reference,
        )
        return payment_id

    def update_payment(self, payment_id: int, data: Mapping[str, Any]) -> None:
        existing = self.get_payment(payment_id)
        changed = validate_payment(data, default_currency=existing.currency, reference=existing.reference)
        if not self._payments.update(replace(changed, payment_id=existing.payment_id)):
            raise ValidationError("Payment update failed")
        logger.info("Payment %s updated", payment_id)

    def delete_payment(self, payment_id: int) -> None:
        if not self._payments.delete_by_id(int(payment_id)):
            raise DataInconsistencyError(f"Payment {payment_id} not found")
        logger.info("Payment %s deleted", payment_id)

    def payment_stats(self, *, date_range: Optional[DateRange] = None) -> dict:
        rows = self.list_payments(date_range=date_range)
        settled = [p for p in rows if p.status not in _VOID_STATUSES]
        payin = sum_amounts(p for p in settled if p.payment_type == PaymentType.CREDIT)
        payout = sum_amounts(p for p in settled if p.payment_type == PaymentType.DEBIT)
        return {
            "total_payments": len(rows),
            "total_amount": payin + payout,
            "total_payin": payin,
            "total_payout": payout,
            "net": payin - payout,
            "total_fees": sum(p.transaction_fee or 0.0 for p in settled),
        }

    def dashboard_summary(self, *, date_range: Optional[DateRange] = None) -> dict:
        """Pay-in minus pay-out minus expenses; rejected claims are not counted."""

        date_range = date_range or DateRange()
        stats = self.payment_stats(date_range=date_range)
        total_expenses = 0.0
        if self._expenses is not None:
            expenses = filter_by_date_range(self._expenses.list_all(), date_range.start, date_range.end)
            total_expenses = sum_amounts(e for e in expenses if e.status != ExpenseStatus.REJECTED)
        return {
            "total_payin": stats["total_payin"],
            "total_payout": stats["total_payout"],
            "total_expenses": total_expenses,
            "balance": stats["total_payin"] - stats["total_payout"] - total_expenses,
        }
