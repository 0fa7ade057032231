from __future__ import annotations

import logging
from typing import Callable, Protocol

from ..common.datetime_utils import now_local
from .model import DeliveryResult

logger = logging.getLogger(__name__)


class NotificationSender(Protocol):
    """Gateway that delivers one text message to one E.164 destination."""

    def send(self, destination: str, body: str) -> DeliveryResult:
        raise NotImplementedError


class LoggingSmsSender(NotificationSender):
    """Test-mode sender: writes the message to the log instead of a carrier."""

    def __init__(self, *, clock: Callable = now_local):
        self._clock = clock

    def send(self, destination: str, body: str) -> DeliveryResult:
        message_id = f"test_{int(self._clock().timestamp() * 1000)}"
        logger.info("TEST MODE - SMS to %s (%s): %s", destination, message_id, body)
        return DeliveryResult(delivered=True, message_id=message_id, test_mode=True)
