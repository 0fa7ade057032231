from __future__ import annotations

from typing import Sequence

from ..core.enums import DeliveryStatus, MessageType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall
from .model import SmsLogEntry
from .repository import SmsLogRepository


class MySQLSmsLogRepository(SmsLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add(self, entry: SmsLogEntry) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO sms_logs(phone_number, message, message_type, status, message_id,
                                     error_message, test_mode, created_at)
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    entry.phone_number,
                    entry.message,
                    entry.message_type.value,
                    entry.status.value,
                    entry.message_id,
                    entry.error_message,
                    int(entry.test_mode),
                    entry.created_at,
                ),
            )
            return int(cur.lastrowid)

    def list_recent(self, limit: int) -> Sequence[SmsLogEntry]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT log_id, phone_number, message, message_type, status, message_id,
                       error_message, test_mode, created_at
                FROM sms_logs
                ORDER BY created_at DESC, log_id DESC
                LIMIT %s
                """,
                (int(limit),),
            )
            return [
                SmsLogEntry(
                    log_id=int(r["log_id"]),
                    phone_number=r["phone_number"],
                    message=r["message"],
                    message_type=MessageType(r["message_type"]),
                    status=DeliveryStatus(r["status"]),
                    message_id=r.get("message_id"),
                    error_message=r.get("error_message"),
                    test_mode=bool(r.get("test_mode", True)),
                    created_at=r["created_at"],
                )
                for r in fetchall(cur)
            ]
