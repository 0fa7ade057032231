from __future__ import annotations

import json
from contextlib import contextmanager
from decimal import Decimal
from typing import Any, Dict, List, Optional, Sequence

from ..core.exceptions import DataIntegrityError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def to_float(value: Any, column: str) -> float:
    """Normalize MySQL DECIMAL/DOUBLE values to float.

    mysql-connector returns DECIMAL columns as decimal.Decimal. Anything that is
    not numeric is a data integrity failure, never silently zero.
    """

    if isinstance(value, bool) or value is None:
        raise DataIntegrityError(f"Column {column} holds a non-numeric value: {value!r}")
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    raise DataIntegrityError(f"Column {column} holds a non-numeric value: {value!r}")


def to_optional_float(value: Any, column: str) -> Optional[float]:
    if value is None:
        return None
    return to_float(value, column)


def encode_id_list(ids: Sequence[int]) -> Optional[str]:
    if not ids:
        return None
    return json.dumps([int(i) for i in ids])


def decode_id_list(value: Any) -> tuple[int, ...]:
    """JSON columns come back as str (pure connector) or bytes (C extension)."""

    if value is None or value == "":
        return ()
    if isinstance(value, (bytes, bytearray)):
        value = value.decode("utf-8")
    if isinstance(value, str):
        value = json.loads(value)
    return tuple(int(i) for i in value)
