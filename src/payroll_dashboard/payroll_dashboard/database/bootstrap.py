from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

import mysql.connector

logger = logging.getLogger(__name__)

REQUIRED_TABLES = (
    "employees",
    "work_records",
    "overtime_records",
    "salary_payments",
    "advances",
    "payments",
    "expenses",
    "sms_logs",
)


@dataclass(frozen=True)
class DBTarget:
    host: str
    port: int
    user: str
    password: str
    database: str


def _as_target(db_config: dict) -> DBTarget:
    return DBTarget(
        host=str(db_config.get("host", "localhost")),
        port=int(db_config.get("port", 3306)),
        user=str(db_config.get("user", "root")),
        password=str(db_config.get("password", "")),
        database=str(db_config.get("database", "payroll_db")),
    )


def _strip_create_db_and_use(sql: str) -> str:
    # Keep schema.sql compatible regardless of DB name.
    sql = re.sub(r"(?im)^\s*CREATE\s+DATABASE\b.*?;\s*$", "", sql)
    sql = re.sub(r"(?im)^\s*USE\b.*?;\s*$", "", sql)
    return sql


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for schema/seed files (handles ';' inside quotes).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False

    for ch in sql:
        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def _exec_sql(cur, sql: str) -> None:
    for stmt in _iter_sql_statements(sql):
        cur.execute(stmt)


def _connect(db_config: dict, *, with_database: bool = True):
    target = _as_target(db_config)
    kwargs = dict(
        host=target.host,
        port=target.port,
        user=target.user,
        password=target.password,
        use_pure=True,
    )
    if with_database:
        kwargs["database"] = target.database
    return mysql.connector.connect(**kwargs)


def ensure_database_exists(db_config: dict) -> None:
    target = _as_target(db_config)
    conn = _connect(db_config, with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{target.database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci;"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(db_config: dict, *, schema_path: str | Path) -> None:
    ensure_database_exists(db_config)

    schema_path = Path(schema_path)
    sql = _strip_create_db_and_use(schema_path.read_text(encoding="utf-8"))

    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied schema %s", schema_path.name)


def apply_seed_sql(db_config: dict, *, seed_path: str | Path) -> None:
    seed_path = Path(seed_path)
    sql = _strip_create_db_and_use(seed_path.read_text(encoding="utf-8"))

    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        _exec_sql(cur, sql)
        conn.commit()
    finally:
        conn.close()
    logger.info("Applied seed %s", seed_path.name)


def ensure_demo_employees(db_config: dict) -> None:
    """Make sure one employee of each kind exists (idempotent on phone number)."""

    conn = _connect(db_config)
    try:
        cur = conn.cursor(dictionary=True)

        def upsert_employee(first_name: str, last_name: str, phone: str, role: str, employee_type: str,
                            monthly_salary: float | None) -> None:
            cur.execute("SELECT employee_id FROM employees WHERE phone=%s", (phone,))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    """
                    UPDATE employees
                    SET first_name=%s, last_name=%s, role=%s, employee_type=%s, monthly_salary=%s, status='active'
                    WHERE phone=%s
                    """,
                    (first_name, last_name, role, employee_type, monthly_salary, phone),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO employees (first_name, last_name, phone, role, employee_type, hire_date, monthly_salary)
                    VALUES (%s, %s, %s, %s, %s, CURDATE(), %s)
                    """,
                    (first_name, last_name, phone, role, employee_type, monthly_salary),
                )

        upsert_employee("Ali", "Raza", "03001234567", "contractor", "contractual", None)
        upsert_employee("Sara", "Khan", "03007654321", "accountant", "fixed", 5000)

        conn.commit()
    finally:
        conn.close()
    logger.info("Demo employees ready")


def list_tables(db_config: dict) -> list[str]:
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
    finally:
        conn.close()


def missing_tables(present: Iterable[str]) -> list[str]:
    have = {t.lower() for t in present}
    return [t for t in REQUIRED_TABLES if t not in have]


def table_row_counts(db_config: dict) -> dict[str, int]:
    """Row count per required table that exists; used to sanity-check a fresh setup."""

    present = set(list_tables(db_config))
    conn = _connect(db_config)
    try:
        cur = conn.cursor()
        counts: dict[str, int] = {}
        for table in REQUIRED_TABLES:
            if table not in present:
                continue
            cur.execute(f"SELECT COUNT(*) FROM `{table}`")
            counts[table] = int(cur.fetchone()[0])
        return counts
    finally:
        conn.close()
