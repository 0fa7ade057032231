from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import ExpenseCategory, ExpenseStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import Expense
from .repository import ExpenseRepository

_COLUMNS = """
    expense_id, amount, currency, category, status, description, expense_date,
    employee_id, approved_by, approved_at, rejection_reason
"""


def _to_expense(r: dict) -> Expense:
    return Expense(
        expense_id=int(r["expense_id"]),
        amount=to_float(r["amount"], "amount"),
        currency=r["currency"],
        category=ExpenseCategory(r["category"]),
        status=ExpenseStatus(r["status"]),
        description=r["description"],
        expense_date=r["expense_date"],
        employee_id=int(r["employee_id"]) if r.get("employee_id") is not None else None,
        approved_by=r.get("approved_by"),
        approved_at=r.get("approved_at"),
        rejection_reason=r.get("rejection_reason"),
    )


def _params(e: Expense) -> tuple:
    return (
        e.amount,
        e.currency,
        e.category.value,
        e.status.value,
        e.description,
        e.expense_date,
        e.employee_id,
        e.approved_by,
        e.approved_at,
        e.rejection_reason,
    )


class MySQLExpenseRepository(ExpenseRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Expense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM expenses ORDER BY expense_date DESC, expense_id DESC")
            return [_to_expense(r) for r in fetchall(cur)]

    def get_by_id(self, expense_id: int) -> Optional[Expense]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM expenses WHERE expense_id=%s", (expense_id,))
            row = fetchone(cur)
            return _to_expense(row) if row else None

    def create(self, expense: Expense) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO expenses(amount, currency, category, status, description, expense_date,
                                     employee_id, approved_by, approved_at, rejection_reason)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                _params(expense),
            )
            return int(cur.lastrowid)

    def update(self, expense: Expense) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE expenses
                SET amount=%s, currency=%s, category=%s, status=%s, description=%s, expense_date=%s,
                    employee_id=%s, approved_by=%s, approved_at=%s, rejection_reason=%s
                WHERE expense_id=%s
                """,
                _params(expense) + (expense.expense_id,),
            )
            return cur.rowcount > 0

    def delete_by_id(self, expense_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM expenses WHERE expense_id=%s", (expense_id,))
            return cur.rowcount > 0
