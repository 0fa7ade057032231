from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from ..common.datetime_utils import now_local
from ..common.money import FormatConfig, format_currency, format_date, format_number
from ..common.validators import require_choice, require_non_empty
from ..core.constants import DEFAULT_SMS_LOG_LIMIT
from ..core.enums import DeliveryStatus, MessageType
from ..employees.model import Employee
from ..ledger.model import Advance, OvertimeRecord, SalaryPayment, WorkRecord
from . import templates
from .model import DeliveryResult, SmsLogEntry, SmsSettings
from .phone import normalize_phone
from .repository import SmsLogRepository
from .sender import NotificationSender

logger = logging.getLogger(__name__)


class NotificationService:
    """Use case: send an SMS through the configured sender and log the outcome.

    Every attempt that reaches the sender is written to the SMS log, whether it
    was delivered or not. A disabled service or an unusable phone number is
    reported back without contacting the sender.
    """

    def __init__(
        self,
        sender: NotificationSender,
        logs: SmsLogRepository,
        settings: Optional[SmsSettings] = None,
        *,
        fmt: Optional[FormatConfig] = None,
        clock: Callable = now_local,
    ):
        self._sender = sender
        self._logs = logs
        self._settings = settings or SmsSettings()
        self._fmt = fmt or FormatConfig()
        self._clock = clock

    @property
    def settings(self) -> SmsSettings:
        return self._settings

    def send(self, phone: str, message: str, message_type=MessageType.CUSTOM) -> DeliveryResult:
        phone = require_non_empty(phone, "phone")
        message = require_non_empty(message, "message")
        message_type = require_choice(message_type, MessageType, "message_type")

        if not self._settings.enabled:
            logger.info("SMS disabled; not sending %s message", message_type.value)
            return DeliveryResult(delivered=False, error="SMS service is disabled", test_mode=self._settings.test_mode)

        destination = normalize_phone(phone, self._settings.default_country_code)
        if not destination:
            logger.warning("Invalid phone number format: %s", phone)
            return DeliveryResult(delivered=False, error="Invalid phone number format", test_mode=self._settings.test_mode)

        try:
            result = self._sender.send(destination, message)
        except Exception as exc:
            # Delivery failures are recorded, never raised into the ledger write that triggered them.
            logger.exception("SMS delivery to %s failed", destination)
            result = DeliveryResult(delivered=False, error=str(exc), test_mode=self._settings.test_mode)

        self._logs.add(
            SmsLogEntry(
                phone_number=destination,
                message=message,
                message_type=message_type,
                status=DeliveryStatus.SENT if result.delivered else DeliveryStatus.FAILED,
                created_at=self._clock(),
                message_id=result.message_id,
                error_message=result.error,
                test_mode=result.test_mode,
            )
        )
        return result

    def list_logs(self, limit: int = DEFAULT_SMS_LOG_LIMIT) -> Sequence[SmsLogEntry]:
        return self._logs.list_recent(max(1, int(limit)))

    def notify_salary_payment(self, employee: Employee, payment: SalaryPayment) -> Optional[DeliveryResult]:
        if not self._settings.notify_on_salary_payment:
            return None
        body = templates.salary_payment(
            employee.full_name,
            format_currency(payment.amount, self._fmt),
            format_date(payment.payment_date, self._fmt),
            self._settings.sender_name,
        )
        return self.send(employee.phone, body, MessageType.SALARY_PAYMENT)

    def notify_advance(self, employee: Employee, advance: Advance) -> Optional[DeliveryResult]:
        if not self._settings.notify_on_advance:
            return None
        body = templates.advance_payment(
            employee.full_name,
            format_currency(advance.amount, self._fmt),
            format_date(advance.payment_date, self._fmt),
            self._settings.sender_name,
        )
        return self.send(employee.phone, body, MessageType.ADVANCE_PAYMENT)

    def notify_overtime(self, employee: Employee, record: OvertimeRecord) -> Optional[DeliveryResult]:
        if not self._settings.notify_on_overtime:
            return None
        body = templates.overtime_approved(
            employee.full_name,
            format_number(record.effective_hours),
            format_date(record.work_date, self._fmt),
            self._settings.sender_name,
        )
        return self.send(employee.phone, body, MessageType.OVERTIME)

    def notify_work(self, employee: Employee, record: WorkRecord) -> Optional[DeliveryResult]:
        if not self._settings.notify_on_work:
            return None
        body = templates.work_assignment(
            employee.full_name,
            record.description,
            format_date(record.work_date, self._fmt),
            self._settings.sender_name,
        )
        return self.send(employee.phone, body, MessageType.WORK_ASSIGNMENT)
