from __future__ import annotations

from typing import Protocol, Sequence

from .model import SmsLogEntry


class SmsLogRepository(Protocol):
    def add(self, entry: SmsLogEntry) -> int:
        raise NotImplementedError

    def list_recent(self, limit: int) -> Sequence[SmsLogEntry]:
        raise NotImplementedError
