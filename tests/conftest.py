from __future__ import annotations

from dataclasses import replace
from datetime import date
from typing import Optional

import pytest

from src.payroll_dashboard.payroll_dashboard.core.enums import EmployeeStatus, EmployeeType
from src.payroll_dashboard.payroll_dashboard.employees.model import (
    ContractualEmployee,
    Employee,
    FixedEmployee,
    NewEmployee,
)
from src.payroll_dashboard.payroll_dashboard.expenses.model import Expense
from src.payroll_dashboard.payroll_dashboard.ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from src.payroll_dashboard.payroll_dashboard.notifications.model import DeliveryResult, SmsLogEntry
from src.payroll_dashboard.payroll_dashboard.payments.model import Payment


class InMemoryEmployees:
    def __init__(self, *employees: Employee):
        self._by_id: dict[int, Employee] = {e.employee_id: e for e in employees}
        self._id = max(self._by_id, default=0)

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        return self._by_id.get(employee_id)

    def list_all(self, *, employee_type: Optional[EmployeeType] = None):
        items = list(self._by_id.values())
        if employee_type is not None:
            items = [e for e in items if e.employee_type == employee_type]
        return items

    @staticmethod
    def _build(employee_id: int, data: NewEmployee) -> Employee:
        common = dict(
            employee_id=employee_id,
            first_name=data.first_name,
            last_name=data.last_name,
            phone=data.phone,
            role=data.role,
            hire_date=data.hire_date,
            status=data.status,
            notes=data.notes,
        )
        if data.employee_type == EmployeeType.FIXED:
            return FixedEmployee(monthly_salary=data.monthly_salary, **common)
        return ContractualEmployee(**common)

    def create(self, data: NewEmployee) -> int:
        self._id += 1
        self._by_id[self._id] = self._build(self._id, data)
        return self._id

    def update(self, employee_id: int, data: NewEmployee) -> bool:
        if employee_id not in self._by_id:
            return False
        self._by_id[employee_id] = self._build(employee_id, data)
        return True

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        if employee_id not in self._by_id:
            return False
        self._by_id[employee_id] = replace(self._by_id[employee_id], status=status)
        return True

    def delete_by_id(self, employee_id: int) -> bool:
        return self._by_id.pop(employee_id, None) is not None


class InMemoryLedger:
    def __init__(self):
        self.work: dict[int, WorkRecord] = {}
        self.overtime: dict[int, OvertimeRecord] = {}
        self.payments: dict[int, SalaryPayment] = {}
        self.advances: dict[int, Advance] = {}
        self._id = 0

    def _next(self) -> int:
        self._id += 1
        return self._id

    # work records
    def list_work_records(self, employee_id: int):
        return [r for r in self.work.values() if r.employee_id == employee_id]

    def get_work_record(self, record_id: int):
        return self.work.get(record_id)

    def create_work_record(self, record: WorkRecord) -> int:
        record_id = self._next()
        self.work[record_id] = replace(record, record_id=record_id)
        return record_id

    def update_work_record(self, record: WorkRecord) -> bool:
        if record.record_id not in self.work:
            return False
        self.work[record.record_id] = record
        return True

    def delete_work_record(self, record_id: int) -> bool:
        return self.work.pop(record_id, None) is not None

    # overtime
    def list_overtime_records(self, employee_id: int):
        return [r for r in self.overtime.values() if r.employee_id == employee_id]

    def get_overtime_record(self, record_id: int):
        return self.overtime.get(record_id)

    def create_overtime_record(self, record: OvertimeRecord) -> int:
        record_id = self._next()
        self.overtime[record_id] = replace(record, record_id=record_id)
        return record_id

    def update_overtime_record(self, record: OvertimeRecord) -> bool:
        if record.record_id not in self.overtime:
            return False
        self.overtime[record.record_id] = record
        return True

    def delete_overtime_record(self, record_id: int) -> bool:
        return self.overtime.pop(record_id, None) is not None

    # salary payments
    def list_salary_payments(self, employee_id: int):
        return [p for p in self.payments.values() if p.employee_id == employee_id]

    def get_salary_payment(self, payment_id: int):
        return self.payments.get(payment_id)

    def create_salary_payment(self, payment: SalaryPayment) -> int:
        payment_id = self._next()
        self.payments[payment_id] = replace(payment, payment_id=payment_id)
        return payment_id

    def update_salary_payment(self, payment: SalaryPayment) -> bool:
        if payment.payment_id not in self.payments:
            return False
        self.payments[payment.payment_id] = payment
        return True

    def delete_salary_payment(self, payment_id: int) -> bool:
        return self.payments.pop(payment_id, None) is not None

    # advances
    def list_advances(self, employee_id: int):
        return [a for a in self.advances.values() if a.employee_id == employee_id]

    def create_advance(self, advance: Advance) -> int:
        advance_id = self._next()
        self.advances[advance_id] = replace(advance, advance_id=advance_id)
        return advance_id

    def delete_advance(self, advance_id: int) -> bool:
        return self.advances.pop(advance_id, None) is not None


class InMemoryExpenses:
    def __init__(self):
        self.items: dict[int, Expense] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.items.values(), key=lambda e: e.expense_date, reverse=True)

    def get_by_id(self, expense_id: int):
        return self.items.get(expense_id)

    def create(self, expense: Expense) -> int:
        self._id += 1
        self.items[self._id] = replace(expense, expense_id=self._id)
        return self._id

    def update(self, expense: Expense) -> bool:
        if expense.expense_id not in self.items:
            return False
        self.items[expense.expense_id] = expense
        return True

    def delete_by_id(self, expense_id: int) -> bool:
        return self.items.pop(expense_id, None) is not None


class InMemoryPayments:
    def __init__(self):
        self.items: dict[int, Payment] = {}
        self._id = 0

    def list_all(self):
        return sorted(self.items.values(), key=lambda p: p.payment_date, reverse=True)

    def get_by_id(self, payment_id: int):
        return self.items.get(payment_id)

    def create(self, payment: Payment) -> int:
        self._id += 1
        self.items[self._id] = replace(payment, payment_id=self._id)
        return self._id

    def update(self, payment: Payment) -> bool:
        if payment.payment_id not in self.items:
            return False
        self.items[payment.payment_id] = payment
        return True

    def delete_by_id(self, payment_id: int) -> bool:
        return self.items.pop(payment_id, None) is not None


class InMemorySmsLogs:
    def __init__(self):
        self.entries: list[SmsLogEntry] = []

    def add(self, entry: SmsLogEntry) -> int:
        self.entries.append(replace(entry, log_id=len(self.entries) + 1))
        return len(self.entries)

    def list_recent(self, limit: int):
        return list(reversed(self.entries))[:limit]


class RecordingSender:
    """Sender double that remembers what it was asked to deliver."""

    def __init__(self, *, fail_with: Optional[Exception] = None):
        self.sent: list[tuple[str, str]] = []
        self._fail_with = fail_with

    def send(self, destination: str, body: str) -> DeliveryResult:
        if self._fail_with is not None:
            raise self._fail_with
        self.sent.append((destination, body))
        return DeliveryResult(delivered=True, message_id=f"msg-{len(self.sent)}", test_mode=True)


@pytest.fixture
def contractual_employee() -> ContractualEmployee:
    return ContractualEmployee(
        employee_id=1,
        first_name="Ali",
        last_name="Raza",
        phone="03001234567",
        role="contractor",
        hire_date=date(2025, 1, 10),
    )


@pytest.fixture
def fixed_employee() -> FixedEmployee:
    return FixedEmployee(
        employee_id=2,
        first_name="Sara",
        last_name="Khan",
        phone="03007654321",
        role="accountant",
        hire_date=date(2025, 3, 1),
        monthly_salary=5000.0,
    )


@pytest.fixture
def employees(contractual_employee, fixed_employee) -> InMemoryEmployees:
    return InMemoryEmployees(contractual_employee, fixed_employee)


@pytest.fixture
def ledger() -> InMemoryLedger:
    return InMemoryLedger()


@pytest.fixture
def expenses_repo() -> InMemoryExpenses:
    return InMemoryExpenses()


@pytest.fixture
def payments_repo() -> InMemoryPayments:
    return InMemoryPayments()


@pytest.fixture
def sms_logs() -> InMemorySmsLogs:
    return InMemorySmsLogs()


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()
