from __future__ import annotations

import logging
from collections import deque
from typing import Mapping

from salon_booking.application.dto.notifications import BookingNotification, PaymentNotification
from salon_booking.application.ports.notification_publisher import NotificationPublisherPort
from salon_booking.infrastructure.messaging.redis_queue import MessageHandler, dispatch_message


class MemoryNotificationQueue(NotificationPublisherPort):
    """In-process queue with the same wire payloads as the Redis publisher."""

    def __init__(self, booking_queue: str = "booking-notifications", payment_queue: str = "payment-notifications") -> None:
        self.booking_queue = booking_queue
        self.payment_queue = payment_queue
        self._messages: deque[tuple[str, str]] = deque()
        self._logger = logging.getLogger(__name__)

    def publish_booking(self, notification: BookingNotification) -> None:
        self._messages.append((self.booking_queue, notification.to_json()))
        self._logger.info("Mock notification queued", extra={"queue": self.booking_queue, "booking_id": notification.booking_id})

    def publish_payment(self, notification: PaymentNotification) -> None:
        self._messages.append((self.payment_queue, notification.to_json()))
        self._logger.info("Mock notification queued", extra={"queue": self.payment_queue, "booking_id": notification.booking_id})

    def pending(self, queue: str | None = None) -> list[str]:
        return [raw for name, raw in self._messages if queue is None or name == queue]

    def drain(self, handlers: Mapping[str, MessageHandler]) -> int:
        """Deliver queued messages in publish order. Returns how many were dispatched."""
        delivered = 0
        while self._messages:
            queue, raw = self._messages.popleft()
            if dispatch_message(handlers, queue, raw):
                delivered += 1
        return delivered
