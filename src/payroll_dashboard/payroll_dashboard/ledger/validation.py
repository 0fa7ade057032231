"""Boundary validation for raw ledger input (form fields, JSON bodies).

Every function takes a mapping of raw values and returns a fully typed record,
or raises `MissingFieldError` / `InvalidNumberError` naming the offending field.
Nothing is coerced: a blank price is an error, never zero.
"""

from __future__ import annotations

import math
import re
from typing import Any, Mapping, Optional

from ..common.validators import (
    optional_amount,
    optional_text,
    require_amount,
    require_date,
    require_non_empty,
)
from ..core.exceptions import InvalidNumberError, ValidationError
from .model import Advance, OvertimeRecord, SalaryPayment, WorkRecord

_MONTH_RE = re.compile(r"^\d{4}-(0[1-9]|1[0-2])$")


def _parse_id_list(value: Any) -> tuple[int, ...]:
    if value is None or value == "":
        return ()
    if isinstance(value, str):
        value = [v for v in value.split(",") if v.strip()]
    try:
        return tuple(int(v) for v in value)
    except (TypeError, ValueError):
        raise ValidationError("work_record_ids must be a list of record ids", field="work_record_ids")


def _line_total(amount: float, multiplier: Optional[float], field_name: str) -> float:
    total = amount if multiplier is None else multiplier * amount
    if math.isinf(total):
        raise InvalidNumberError(f"{field_name} is too large", field=field_name)
    return total


def _parse_flag(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    return str(value).strip().lower() in {"1", "true", "yes", "on"}


def validate_work_record(data: Mapping[str, Any], *, employee_id: int, record_id: Optional[int] = None) -> WorkRecord:
    work_date = require_date(data.get("date"), "date")
    description = require_non_empty(data.get("description"), "description")
    price = require_amount(data.get("price"), "price")
    quantity = optional_amount(data.get("quantity"), "quantity")

    total = _line_total(price, quantity, "price")
    return WorkRecord(
        employee_id=int(employee_id),
        work_date=work_date,
        description=description,
        quantity=quantity,
        price=price,
        total=total,
        record_id=record_id,
    )


def validate_overtime_record(
    data: Mapping[str, Any], *, employee_id: int, record_id: Optional[int] = None
) -> OvertimeRecord:
    work_date = require_date(data.get("date"), "date")
    description = require_non_empty(data.get("description"), "description")
    rate = require_amount(data.get("rate"), "rate")
    hours = optional_amount(data.get("hours"), "hours")

    amount = _line_total(rate, hours, "rate")
    return OvertimeRecord(
        employee_id=int(employee_id),
        work_date=work_date,
        hours=hours,
        rate=rate,
        amount=amount,
        description=description,
        record_id=record_id,
    )


def validate_salary_payment(
    data: Mapping[str, Any], *, employee_id: int, payment_id: Optional[int] = None
) -> SalaryPayment:
    amount = require_amount(data.get("amount"), "amount")
    payment_date = require_date(data.get("payment_date") or data.get("date"), "payment_date")

    month = optional_text(data.get("month"))
    if month is not None and not _MONTH_RE.match(month):
        raise InvalidNumberError("month must look like YYYY-MM", field="month")

    return SalaryPayment(
        employee_id=int(employee_id),
        amount=amount,
        payment_date=payment_date,
        notes=optional_text(data.get("notes")),
        payment_type=optional_text(data.get("payment_type") or data.get("type")),
        month=month,
        work_record_ids=_parse_id_list(data.get("work_record_ids")),
        is_advance_deduction=_parse_flag(data.get("is_advance_deduction")),
        payment_id=payment_id,
    )


def validate_advance(data: Mapping[str, Any], *, employee_id: int, advance_id: Optional[int] = None) -> Advance:
    amount = require_amount(data.get("amount"), "amount")
    payment_date = require_date(data.get("payment_date") or data.get("date"), "payment_date")
    return Advance(
        employee_id=int(employee_id),
        amount=amount,
        payment_date=payment_date,
        reason=optional_text(data.get("reason")),
        notes=optional_text(data.get("notes")),
        advance_id=advance_id,
    )
