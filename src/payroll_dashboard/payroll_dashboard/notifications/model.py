from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_COUNTRY_CODE
from ..core.enums import DeliveryStatus, MessageType


@dataclass(frozen=True)
class DeliveryResult:
    delivered: bool
    message_id: Optional[str] = None
    error: Optional[str] = None
    test_mode: bool = False


@dataclass(frozen=True)
class SmsLogEntry:
    phone_number: str
    message: str
    message_type: MessageType
    status: DeliveryStatus
    created_at: datetime
    message_id: Optional[str] = None
    error_message: Optional[str] = None
    test_mode: bool = True
    log_id: Optional[int] = None


@dataclass(frozen=True)
class SmsSettings:
    enabled: bool = False
    test_mode: bool = True
    default_country_code: str = DEFAULT_COUNTRY_CODE
    sender_name: str = "Payroll Dashboard"
    notify_on_salary_payment: bool = True
    notify_on_advance: bool = True
    notify_on_overtime: bool = False
    notify_on_work: bool = False
