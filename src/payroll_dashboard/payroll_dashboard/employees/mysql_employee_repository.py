from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import EmployeeStatus, EmployeeType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, to_float
from .model import ContractualEmployee, Employee, FixedEmployee, NewEmployee
from .repository import EmployeeRepository

_COLUMNS = """
    employee_id, first_name, last_name, phone, role, employee_type,
    status, hire_date, monthly_salary, notes
"""


def _to_employee(row: dict) -> Employee:
    common = dict(
        employee_id=int(row["employee_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        phone=row["phone"],
        role=row["role"],
        hire_date=row["hire_date"],
        status=EmployeeStatus(row.get("status") or EmployeeStatus.ACTIVE.value),
        notes=row.get("notes"),
    )
    if EmployeeType(row["employee_type"]) == EmployeeType.FIXED:
        return FixedEmployee(monthly_salary=to_float(row.get("monthly_salary"), "monthly_salary"), **common)
    return ContractualEmployee(**common)


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, employee_id: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM employees WHERE employee_id=%s", (employee_id,))
            row = fetchone(cur)
            if not row:
                return None
            return _to_employee(row)

    def list_all(self, *, employee_type: Optional[EmployeeType] = None) -> Sequence[Employee]:
        sql = f"SELECT {_COLUMNS} FROM employees"
        params: tuple = ()
        if employee_type is not None:
            sql += " WHERE employee_type=%s"
            params = (employee_type.value,)
        sql += " ORDER BY created_at DESC, employee_id DESC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_employee(r) for r in fetchall(cur)]

    def create(self, data: NewEmployee) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO employees(first_name, last_name, phone, role, employee_type,
                                      status, hire_date, monthly_salary, notes)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.first_name,
                    data.last_name,
                    data.phone,
                    data.role,
                    data.employee_type.value,
                    data.status.value,
                    data.hire_date,
                    data.monthly_salary,
                    data.notes,
                ),
            )
            return int(cur.lastrowid)

    def update(self, employee_id: int, data: NewEmployee) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE employees
                SET first_name=%s, last_name=%s, phone=%s, role=%s, employee_type=%s,
                    status=%s, hire_date=%s, monthly_salary=%s, notes=%s
                WHERE employee_id=%s
                """,
                (
                    data.first_name,
                    data.last_name,
                    data.phone,
                    data.role,
                    data.employee_type.value,
                    data.status.value,
                    data.hire_date,
                    data.monthly_salary,
                    data.notes,
                    employee_id,
                ),
            )
            return cur.rowcount > 0

    def set_status(self, employee_id: int, *, status: EmployeeStatus) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE employees SET status=%s WHERE employee_id=%s", (status.value, employee_id))
            return cur.rowcount > 0

    def delete_by_id(self, employee_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employees WHERE employee_id=%s", (employee_id,))
            return cur.rowcount > 0
