from __future__ import annotations

from pathlib import Path

from src.payroll_dashboard.payroll_dashboard.database.bootstrap import (
    REQUIRED_TABLES,
    _iter_sql_statements,
    _strip_create_db_and_use,
    missing_tables,
)


def test_splitter_keeps_semicolons_inside_quotes():
    sql = "INSERT INTO t VALUES ('a;b');\nINSERT INTO t VALUES (\"c\");  "

    assert list(_iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'INSERT INTO t VALUES ("c")']


def test_create_database_and_use_lines_are_dropped():
    sql = "CREATE DATABASE IF NOT EXISTS payroll_db;\nUSE payroll_db;\nCREATE TABLE x (id INT);"

    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE x (id INT)"]


def test_missing_tables_reports_in_declared_order():
    present = [t.upper() for t in REQUIRED_TABLES if t not in ("payments", "sms_logs")]

    assert missing_tables(present) == ["payments", "sms_logs"]
    assert missing_tables(REQUIRED_TABLES) == []


def test_schema_file_creates_every_required_table():
    schema = (Path(__file__).resolve().parents[2] / "database" / "schema.sql").read_text(encoding="utf-8")

    for table in REQUIRED_TABLES:
        assert f"CREATE TABLE IF NOT EXISTS {table} (" in schema
