from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Advance, OvertimeRecord, SalaryPayment, WorkRecord


class LedgerRepository(Protocol):
    """Record store for ledger entries, read per employee."""

    # work records
    def list_work_records(self, employee_id: int) -> Sequence[WorkRecord]:
        raise NotImplementedError

    def get_work_record(self, record_id: int) -> Optional[WorkRecord]:
        raise NotImplementedError

    def create_work_record(self, record: WorkRecord) -> int:
        raise NotImplementedError

    def update_work_record(self, record: WorkRecord) -> bool:
        raise NotImplementedError

    def delete_work_record(self, record_id: int) -> bool:
        raise NotImplementedError

    # overtime
    def list_overtime_records(self, employee_id: int) -> Sequence[OvertimeRecord]:
        raise NotImplementedError

    def get_overtime_record(self, record_id: int) -> Optional[OvertimeRecord]:
        raise NotImplementedError

    def create_overtime_record(self, record: OvertimeRecord) -> int:
        raise NotImplementedError

    def update_overtime_record(self, record: OvertimeRecord) -> bool:
        raise NotImplementedError

    def delete_overtime_record(self, record_id: int) -> bool:
        raise NotImplementedError

    # salary payments
    def list_salary_payments(self, employee_id: int) -> Sequence[SalaryPayment]:
        raise NotImplementedError

    def get_salary_payment(self, payment_id: int) -> Optional[SalaryPayment]:
        raise NotImplementedError

    def create_salary_payment(self, payment: SalaryPayment) -> int:
        raise NotImplementedError

    def update_salary_payment(self, payment: SalaryPayment) -> bool:
        raise NotImplementedError

    def delete_salary_payment(self, payment_id: int) -> bool:
        raise NotImplementedError

    # advances
    def list_advances(self, employee_id: int) -> Sequence[Advance]:
        raise NotImplementedError

    def create_advance(self, advance: Advance) -> int:
        raise NotImplementedError

    def delete_advance(self, advance_id: int) -> bool:
        raise NotImplementedError
