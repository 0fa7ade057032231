from __future__ import annotations

from datetime import date

import pytest

from src.payroll_dashboard.payroll_dashboard.core.exceptions import InvalidNumberError, MissingFieldError, ValidationError
from src.payroll_dashboard.payroll_dashboard.ledger.validation import (
    validate_advance,
    validate_overtime_record,
    validate_salary_payment,
    validate_work_record,
)


def test_work_record_total_is_quantity_times_price():
    record = validate_work_record({"date": "2025-09-15", "description": "Stitching", "quantity": "40", "price": "50"}, employee_id=1)

    assert record.work_date == date(2025, 9, 15)
    assert record.quantity == 40
    assert record.total == 2000


@pytest.mark.parametrize("quantity", [None, "", "   "])
def test_work_record_without_quantity_is_a_lump_sum(quantity):
    record = validate_work_record({"date": "2025-09-15", "description": "Setup", "quantity": quantity, "price": 750}, employee_id=1)

    assert record.quantity is None
    assert record.total == 750


@pytest.mark.parametrize(
    "data,field",
    [
        ({"date": "2025-09-15", "description": "x", "price": ""}, "price"),
        ({"date": "2025-09-15", "description": "x", "price": "abc"}, "price"),
        ({"date": "2025-09-15", "description": "  ", "price": "10"}, "description"),
        ({"description": "x", "price": "10"}, "date"),
    ],
)
def test_work_record_missing_fields(data, field):
    with pytest.raises(MissingFieldError) as exc:
        validate_work_record(data, employee_id=1)
    assert exc.value.field == field


@pytest.mark.parametrize(
    "data,field",
    [
        ({"date": "2025-09-15", "description": "x", "price": "-1"}, "price"),
        ({"date": "2025-09-15", "description": "x", "price": "nan"}, "price"),
        ({"date": "2025-09-15", "description": "x", "price": "10", "quantity": "inf"}, "quantity"),
        ({"date": "2025-02-30", "description": "x", "price": "10"}, "date"),
        ({"date": "2025-09-15", "description": "x", "price": 10**400}, "price"),
        ({"date": "2025-09-15", "description": "x", "price": "1e200", "quantity": "1e200"}, "price"),
    ],
)
def test_work_record_invalid_numbers(data, field):
    with pytest.raises(InvalidNumberError) as exc:
        validate_work_record(data, employee_id=1)
    assert exc.value.field == field


def test_blank_price_is_never_zero():
    with pytest.raises(ValidationError):
        validate_work_record({"date": "2025-09-15", "description": "x", "price": None}, employee_id=1)


def test_overtime_amount_is_hours_times_rate():
    record = validate_overtime_record(
        {"date": "2025-09-10", "hours": "2.5", "rate": "40", "description": " Audit "}, employee_id=2
    )

    assert record.amount == 100
    assert record.description == "Audit"


@pytest.mark.parametrize("description", [None, "", "  "])
def test_overtime_requires_description(description):
    with pytest.raises(MissingFieldError) as exc:
        validate_overtime_record(
            {"date": "2025-09-10", "hours": "2", "rate": "40", "description": description}, employee_id=2
        )
    assert exc.value.field == "description"


def test_overtime_without_hours_uses_rate_as_amount():
    record = validate_overtime_record({"date": "2025-09-10", "rate": "150", "description": "Sunday shift"}, employee_id=2)

    assert record.hours is None
    assert record.amount == 150


def test_overtime_negative_hours_rejected():
    with pytest.raises(InvalidNumberError):
        validate_overtime_record(
            {"date": "2025-09-10", "hours": "-2", "rate": "40", "description": "Audit"}, employee_id=2
        )


def test_salary_payment_fields():
    payment = validate_salary_payment(
        {
            "amount": "1,500",
            "date": "2025-09-16",
            "type": "bank",
            "month": "2025-09",
            "work_record_ids": "3, 4",
            "is_advance_deduction": "on",
        },
        employee_id=1,
    )

    assert payment.amount == 1500
    assert payment.payment_date == date(2025, 9, 16)
    assert payment.payment_type == "bank"
    assert payment.work_record_ids == (3, 4)
    assert payment.is_advance_deduction is True


def test_salary_payment_bad_month():
    with pytest.raises(InvalidNumberError):
        validate_salary_payment({"amount": 10, "payment_date": "2025-09-16", "month": "2025-13"}, employee_id=1)


def test_salary_payment_requires_amount():
    with pytest.raises(MissingFieldError):
        validate_salary_payment({"payment_date": "2025-09-16"}, employee_id=1)


def test_advance_requires_date():
    with pytest.raises(MissingFieldError):
        validate_advance({"amount": 200}, employee_id=1)
