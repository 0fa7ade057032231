from __future__ import annotations

from datetime import datetime

import pytest

from src.payroll_dashboard.payroll_dashboard.core.enums import DeliveryStatus, MessageType
from src.payroll_dashboard.payroll_dashboard.core.exceptions import DataInconsistencyError, MissingFieldError
from src.payroll_dashboard.payroll_dashboard.ledger.service import LedgerService
from src.payroll_dashboard.payroll_dashboard.notifications.model import SmsSettings
from src.payroll_dashboard.payroll_dashboard.notifications.service import NotificationService

FIXED_CLOCK = datetime(2025, 10, 1, 9, 30)


@pytest.fixture
def notifications(sender, sms_logs):
    return NotificationService(sender, sms_logs, SmsSettings(enabled=True), clock=lambda: FIXED_CLOCK)


@pytest.fixture
def service(employees, ledger, notifications):
    return LedgerService(employees, ledger, notifications=notifications)


def test_add_work_record_for_contractual_employee(service, ledger):
    record_id = service.add_work_record(1, {"date": "2025-09-15", "description": "Stitching", "quantity": 40, "price": 50})

    stored = ledger.get_work_record(record_id)
    assert stored.total == 2000
    assert stored.employee_id == 1


def test_work_records_only_for_contractual_employees(service, ledger):
    with pytest.raises(DataInconsistencyError):
        service.add_work_record(2, {"date": "2025-09-15", "description": "x", "price": 10})
    assert ledger.work == {}


def test_overtime_only_for_fixed_employees(service):
    with pytest.raises(DataInconsistencyError):
        service.add_overtime_record(1, {"date": "2025-09-15", "hours": 2, "rate": 10})


def test_unknown_employee(service):
    with pytest.raises(DataInconsistencyError):
        service.add_salary_payment(42, {"amount": 100, "date": "2025-09-01"})


def test_invalid_input_blocks_the_write(service, ledger):
    with pytest.raises(MissingFieldError):
        service.add_work_record(1, {"date": "2025-09-15", "description": "x", "price": ""})
    assert ledger.work == {}


def test_edit_keeps_owner_and_id(service, ledger):
    record_id = service.add_work_record(1, {"date": "2025-09-15", "description": "a", "price": 10})

    service.edit_work_record(record_id, {"date": "2025-09-16", "description": "b", "quantity": 3, "price": 10})

    stored = ledger.get_work_record(record_id)
    assert (stored.record_id, stored.employee_id, stored.total) == (record_id, 1, 30)


def test_delete_missing_record(service):
    with pytest.raises(DataInconsistencyError):
        service.delete_salary_payment(123)


def test_salary_payment_sends_sms_and_logs_it(service, sender, sms_logs, ledger):
    payment_id = service.add_salary_payment(1, {"amount": 1500, "date": "2025-09-16"})

    assert payment_id in ledger.payments
    assert len(sender.sent) == 1
    destination, body = sender.sent[0]
    assert destination == "+923001234567"
    assert "Rs 1,500.00" in body and "16/09/2025" in body
    entry = sms_logs.entries[0]
    assert entry.message_type == MessageType.SALARY_PAYMENT
    assert entry.status == DeliveryStatus.SENT


def test_overtime_notification_off_by_default(service, sender):
    service.add_overtime_record(2, {"date": "2025-09-10", "hours": 2, "rate": 40, "description": "Audit"})

    assert sender.sent == []


def test_failed_notification_does_not_fail_the_write(employees, ledger, sms_logs):
    class BrokenSender:
        def send(self, destination, body):
            raise ConnectionError("gateway down")

    notifications = NotificationService(BrokenSender(), sms_logs, SmsSettings(enabled=True), clock=lambda: FIXED_CLOCK)
    service = LedgerService(employees, ledger, notifications=notifications)

    advance_id = service.add_advance(2, {"amount": 300, "date": "2025-09-05", "reason": "Medical"})

    assert advance_id in ledger.advances
    assert sms_logs.entries[0].status == DeliveryStatus.FAILED
    assert sms_logs.entries[0].error_message == "gateway down"


def test_works_without_notifications(employees, ledger):
    service = LedgerService(employees, ledger)

    service.add_advance(1, {"amount": 50, "date": "2025-09-05"})
    service.delete_advance(next(iter(ledger.advances)))

    assert ledger.advances == {}
