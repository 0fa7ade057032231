from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import (
    db_cursor,
    decode_id_list,
    encode_id_list,
    fetchall,
    fetchone,
    to_float,
    to_optional_float,
)
from .model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from .repository import LedgerRepository


def _to_work_record(r: dict) -> WorkRecord:
    return WorkRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        description=r["description"],
        quantity=to_optional_float(r.get("quantity"), "work_records.quantity"),
        price=to_float(r["price"], "work_records.price"),
        total=to_float(r["total"], "work_records.total"),
    )


def _to_overtime_record(r: dict) -> OvertimeRecord:
    return OvertimeRecord(
        record_id=int(r["record_id"]),
        employee_id=int(r["employee_id"]),
        work_date=r["work_date"],
        description=r.get("description"),
        hours=to_optional_float(r.get("hours"), "overtime_records.hours"),
        rate=to_float(r["rate"], "overtime_records.rate"),
        amount=to_float(r["amount"], "overtime_records.amount"),
    )


def _to_salary_payment(r: dict) -> SalaryPayment:
    return SalaryPayment(
        payment_id=int(r["payment_id"]),
        employee_id=int(r["employee_id"]),
        amount=to_float(r["amount"], "salary_payments.amount"),
        payment_date=r["payment_date"],
        notes=r.get("notes"),
        payment_type=r.get("payment_type"),
        month=r.get("month"),
        work_record_ids=decode_id_list(r.get("work_record_ids")),
        is_advance_deduction=bool(r.get("is_advance_deduction", False)),
    )


def _to_advance(r: dict) -> Advance:
    return Advance(
        advance_id=int(r["advance_id"]),
        employee_id=int(r["employee_id"]),
        amount=to_float(r["amount"], "advances.amount"),
        payment_date=r["payment_date"],
        reason=r.get("reason"),
        notes=r.get("notes"),
    )


class MySQLLedgerRepository(LedgerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    # ---- work records -------------------------------------------------

    def list_work_records(self, employee_id: int) -> Sequence[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, work_date, description, quantity, price, total
                FROM work_records
                WHERE employee_id=%s
                ORDER BY work_date DESC, record_id DESC
                """,
                (employee_id,),
            )
            return [_to_work_record(r) for r in fetchall(cur)]

    def get_work_record(self, record_id: int) -> Optional[WorkRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, work_date, description, quantity, price, total
                FROM work_records
                WHERE record_id=%s
                """,
                (record_id,),
            )
            r = fetchone(cur)
            return _to_work_record(r) if r else None

    def create_work_record(self, record: WorkRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO work_records(employee_id, work_date, description, quantity, price, total)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (record.employee_id, record.work_date, record.description, record.quantity, record.price, record.total),
            )
            return int(cur.lastrowid)

    def update_work_record(self, record: WorkRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE work_records
                SET work_date=%s, description=%s, quantity=%s, price=%s, total=%s
                WHERE record_id=%s
                """,
                (record.work_date, record.description, record.quantity, record.price, record.total, record.record_id),
            )
            return cur.rowcount > 0

    def delete_work_record(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM work_records WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0

    # ---- overtime -----------------------------------------------------

    def list_overtime_records(self, employee_id: int) -> Sequence[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, work_date, description, hours, rate, amount
                FROM overtime_records
                WHERE employee_id=%s
                ORDER BY work_date DESC, record_id DESC
                """,
                (employee_id,),
            )
            return [_to_overtime_record(r) for r in fetchall(cur)]

    def get_overtime_record(self, record_id: int) -> Optional[OvertimeRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT record_id, employee_id, work_date, description, hours, rate, amount
                FROM overtime_records
                WHERE record_id=%s
                """,
                (record_id,),
            )
            r = fetchone(cur)
            return _to_overtime_record(r) if r else None

    def create_overtime_record(self, record: OvertimeRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO overtime_records(employee_id, work_date, description, hours, rate, amount)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (record.employee_id, record.work_date, record.description, record.hours, record.rate, record.amount),
            )
            return int(cur.lastrowid)

    def update_overtime_record(self, record: OvertimeRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE overtime_records
                SET work_date=%s, description=%s, hours=%s, rate=%s, amount=%s
                WHERE record_id=%s
                """,
                (record.work_date, record.description, record.hours, record.rate, record.amount, record.record_id),
            )
            return cur.rowcount > 0

    def delete_overtime_record(self, record_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM overtime_records WHERE record_id=%s", (record_id,))
            return cur.rowcount > 0

    # ---- salary payments ----------------------------------------------

    def list_salary_payments(self, employee_id: int) -> Sequence[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_id, employee_id, amount, payment_date, notes, payment_type,
                       month, work_record_ids, is_advance_deduction
                FROM salary_payments
                WHERE employee_id=%s
                ORDER BY payment_date DESC, payment_id DESC
                """,
                (employee_id,),
            )
            return [_to_salary_payment(r) for r in fetchall(cur)]

    def get_salary_payment(self, payment_id: int) -> Optional[SalaryPayment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT payment_id, employee_id, amount, payment_date, notes, payment_type,
                       month, work_record_ids, is_advance_deduction
                FROM salary_payments
                WHERE payment_id=%s
                """,
                (payment_id,),
            )
            r = fetchone(cur)
            return _to_salary_payment(r) if r else None

    def create_salary_payment(self, payment: SalaryPayment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO salary_payments(employee_id, amount, payment_date, notes, payment_type,
                                            month, work_record_ids, is_advance_deduction)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    payment.employee_id,
                    payment.amount,
                    payment.payment_date,
                    payment.notes,
                    payment.payment_type,
                    payment.month,
                    encode_id_list(payment.work_record_ids),
                    int(payment.is_advance_deduction),
                ),
            )
            return int(cur.lastrowid)

    def update_salary_payment(self, payment: SalaryPayment) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary_payments
                SET amount=%s, payment_date=%s, notes=%s, payment_type=%s, month=%s,
                    work_record_ids=%s, is_advance_deduction=%s
                WHERE payment_id=%s
                """,
                (
                    payment.amount,
                    payment.payment_date,
                    payment.notes,
                    payment.payment_type,
                    payment.month,
                    encode_id_list(payment.work_record_ids),
                    int(payment.is_advance_deduction),
                    payment.payment_id,
                ),
            )
            return cur.rowcount > 0

    def delete_salary_payment(self, payment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary_payments WHERE payment_id=%s", (payment_id,))
            return cur.rowcount > 0

    # ---- advances -----------------------------------------------------

    def list_advances(self, employee_id: int) -> Sequence[Advance]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT advance_id, employee_id, amount, payment_date, reason, notes
                FROM advances
                WHERE employee_id=%s
                ORDER BY payment_date DESC, advance_id DESC
                """,
                (employee_id,),
            )
            return [_to_advance(r) for r in fetchall(cur)]

    def create_advance(self, advance: Advance) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO advances(employee_id, amount, payment_date, reason, notes)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (advance.employee_id, advance.amount, advance.payment_date, advance.reason, advance.notes),
            )
            return int(cur.lastrowid)

    def delete_advance(self, advance_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM advances WHERE advance_id=%s", (advance_id,))
            return cur.rowcount > 0
