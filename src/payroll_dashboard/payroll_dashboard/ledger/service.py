from __future__ import annotations

import logging
from typing import Any, Callable, Mapping, Optional, Sequence

from ..core.enums import EmployeeType
from ..core.exceptions import DataInconsistencyError, ValidationError
from ..employees.model import Employee
from ..employees.repository import EmployeeRepository
from ..notifications.service import NotificationService
from .model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from .repository import LedgerRepository
from .validation import validate_advance, validate_overtime_record, validate_salary_payment, validate_work_record

logger = logging.getLogger(__name__)


class LedgerService:
    """Use case: record work, overtime, salary payments and advances.

    Input is validated before anything is stored. Work records belong to
    contractual employees and overtime records to fixed employees; salary
    payments and advances are accepted for both.
    """

    def __init__(
        self,
        employees: EmployeeRepository,
        ledger: LedgerRepository,
        *,
        notifications: Optional[NotificationService] = None,
    ):
        self._employees = employees
        self._ledger = ledger
        self._notifications = notifications

    def _get_employee(self, employee_id: int, *, expected: Optional[EmployeeType] = None) -> Employee:
        employee = self._employees.get_by_id(int(employee_id))
        if not employee:
            raise DataInconsistencyError(f"Employee {employee_id} not found")
        if expected is not None and employee.employee_type != expected:
            raise DataInconsistencyError(
                f"Employee {employee_id} is {employee.employee_type.value}, expected {expected.value}"
            )
        return employee

    def _notify(self, send: Callable[..., Any], employee: Employee, record: Any) -> None:
        try:
            send(employee, record)
        except Exception:
            # The ledger write already happened; a notification problem must not undo it.
            logger.exception("Notification for employee %s failed", employee.employee_id)

    # work records
    def list_work_records(self, employee_id: int) -> Sequence[WorkRecord]:
        self._get_employee(employee_id, expected=EmployeeType.CONTRACTUAL)
        return self._ledger.list_work_records(int(employee_id))

    def add_work_record(self, employee_id: int, data: Mapping[str, Any]) -> int:
        employee = self._get_employee(employee_id, expected=EmployeeType.CONTRACTUAL)
        record = validate_work_record(data, employee_id=employee.employee_id)
        record_id = self._ledger.create_work_record(record)
        logger.info("Work record %s added for employee %s (total=%s)", record_id, employee.employee_id, record.total)
        if self._notifications:
            self._notify(self._notifications.notify_work, employee, record)
        return record_id

    def edit_work_record(self, record_id: int, data: Mapping[str, Any]) -> None:
        existing = self._ledger.get_work_record(int(record_id))
        if not existing:
            raise DataInconsistencyError(f"Work record {record_id} not found")
        record = validate_work_record(data, employee_id=existing.employee_id, record_id=existing.record_id)
        if not self._ledger.update_work_record(record):
            raise ValidationError("Work record update failed")
        logger.info("Work record %s updated", record_id)

    def delete_work_record(self, record_id: int) -> None:
        if not self._ledger.delete_work_record(int(record_id)):
            raise DataInconsistencyError(f"Work record {record_id} not found")
        logger.info("Work record %s deleted", record_id)

    # overtime
    def list_overtime_records(self, employee_id: int) -> Sequence[OvertimeRecord]:
        self._get_employee(employee_id, expected=EmployeeType.FIXED)
        return self._ledger.list_overtime_records(int(employee_id))

    def add_overtime_record(self, employee_id: int, data: Mapping[str, Any]) -> int:
        employee = self._get_employee(employee_id, expected=EmployeeType.FIXED)
        record = validate_overtime_record(data, employee_id=employee.employee_id)
        record_id = self._ledger.create_overtime_record(record)
        logger.info("Overtime record %s added for employee %s (amount=%s)", record_id, employee.employee_id, record.amount)
        if self._notifications:
            self._notify(self._notifications.notify_overtime, employee, record)
        return record_id

    def edit_overtime_record(self, record_id: int, data: Mapping[str, Any]) -> None:
        existing = self._ledger.get_overtime_record(int(record_id))
        if not existing:
            raise DataInconsistencyError(f"Overtime record {record_id} not found")
        record = validate_overtime_record(data, employee_id=existing.employee_id, record_id=existing.record_id)
        if not self._ledger.update_overtime_record(record):
            raise ValidationError("Overtime record update failed")
        logger.info("Overtime record %s updated", record_id)

    def delete_overtime_record(self, record_id: int) -> None:
        if not self._ledger.delete_overtime_record(int(record_id)):
            raise DataInconsistencyError(f"Overtime record {record_id} not found")
        logger.info("Overtime record %s deleted", record_id)

    # salary payments
    def list_salary_payments(self, employee_id: int) -> Sequence[SalaryPayment]:
        self._get_employee(employee_id)
        return self._ledger.list_salary_payments(int(employee_id))

    def add_salary_payment(self, employee_id: int, data: Mapping[str, Any]) -> int:
        employee = self._get_employee(employee_id)
        payment = validate_salary_payment(data, employee_id=employee.employee_id)
        payment_id = self._ledger.create_salary_payment(payment)
        logger.info("Salary payment %s recorded for employee %s (amount=%s)", payment_id, employee.employee_id, payment.amount)
        if self._notifications:
            self._notify(self._notifications.notify_salary_payment, employee, payment)
        return payment_id

    def edit_salary_payment(self, payment_id: int, data: Mapping[str, Any]) -> None:
        existing = self._ledger.get_salary_payment(int(payment_id))
        if not existing:
            raise DataInconsistencyError(f"Salary payment {payment_id} not found")
        payment = validate_salary_payment(data, employee_id=existing.employee_id, payment_id=existing.payment_id)
        if not self._ledger.update_salary_payment(payment):
            raise ValidationError("Salary payment update failed")
        logger.info("Salary payment %s updated", payment_id)

    def delete_salary_payment(self, payment_id: int) -> None:
        if not self._ledger.delete_salary_payment(int(payment_id)):
            raise DataInconsistencyError(f"Salary payment {payment_id} not found")
        logger.info("Salary payment %s deleted", payment_id)

    # advances
    def list_advances(self, employee_id: int) -> Sequence[Advance]:
        self._get_employee(employee_id)
        return self._ledger.list_advances(int(employee_id))

    def add_advance(self, employee_id: int, data: Mapping[str, Any]) -> int:
        employee = self._get_employee(employee_id)
        advance = validate_advance(data, employee_id=employee.employee_id)
        advance_id = self._ledger.create_advance(advance)
        logger.info("Advance %s recorded for employee %s (amount=%s)", advance_id, employee.employee_id, advance.amount)
        if self._notifications:
            self._notify(self._notifications.notify_advance, employee, advance)
        return advance_id

    def delete_advance(self, advance_id: int) -> None:
        if not self._ledger.delete_advance(int(advance_id)):
            raise DataInconsistencyError(f"Advance {advance_id} not found")
        logger.info("Advance %s deleted", advance_id)
