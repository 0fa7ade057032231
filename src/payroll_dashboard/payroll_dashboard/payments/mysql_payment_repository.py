from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import PaymentMethod, PaymentStatus, PaymentType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float, to_optional_float
from .model import Payment
from .repository import PaymentRepository

_COLUMNS = """
    payment_id, amount, currency, type, status, method, description, reference, payment_date,
    customer_id, customer_name, customer_email, transaction_fee
"""


def _to_payment(r: dict) -> Payment:
    return Payment(
        payment_id=int(r["payment_id"]),
        amount=to_float(r["amount"], "amount"),
        currency=r["currency"],
        payment_type=PaymentType(r["type"]),
        status=PaymentStatus(r["status"]),
        method=PaymentMethod(r["method"]),
        description=r["description"],
        reference=r["reference"],
        payment_date=r["payment_date"],
        customer_id=r.get("customer_id"),
        customer_name=r.get("customer_name"),
        customer_email=r.get("customer_email"),
        transaction_fee=to_optional_float(r.get("transaction_fee"), "transaction_fee"),
    )


def _params(p: Payment) -> tuple:
    return (
        p.amount,
        p.currency,
        p.payment_type.value,
        p.status.value,
        p.method.value,
        p.description,
        p.reference,
        p.payment_date,
        p.customer_id,
        p.customer_name,
        p.customer_email,
        p.transaction_fee,
        p.net_amount,
    )


class MySQLPaymentRepository(PaymentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments ORDER BY payment_date DESC, payment_id DESC")
            return [_to_payment(r) for r in fetchall(cur)]

    def get_by_id(self, payment_id: int) -> Optional[Payment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM payments WHERE payment_id=%s", (payment_id,))
            row = fetchone(cur)
            return _to_payment(row) if row else None

    def create(self, payment: Payment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO payments(amount, currency, type, status, method, description, reference, payment_date,
                                     customer_id, customer_name, customer_email, transaction_fee, net_amount)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(payment),
            )
            return int(cur.lastrowid)

    def update(self, payment: Payment) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE payments
                SET amount=%s, currency=%s, type=%s, status=%s, method=%s, description=%s, reference=%s,
                    payment_date=%s, customer_id=%s, customer_name=%s, customer_email=%s,
                    transaction_fee=%s, net_amount=%s
                WHERE payment_id=%s
                """,
                _params(payment) + (payment.payment_id,),
            )
            return cur.rowcount > 0

    def delete_by_id(self, payment_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM payments WHERE payment_id=%s", (payment_id,))
            return cur.rowcount > 0
