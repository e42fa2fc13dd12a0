"""
Redis list-backed notification queues.

Publishers LPUSH JSON payloads onto a named list; the notification worker
BRPOPs across every registered list, so each message is delivered to one
consumer. Delivery is at-most-once: a message popped by a worker that
crashes before handling it is lost.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable, Mapping

from redis import Redis
from redis.exceptions import RedisError

from salon_booking.application.dto.notifications import BookingNotification, PaymentNotification
from salon_booking.application.exceptions import NotificationPublishError
from salon_booking.application.ports.notification_publisher import NotificationPublisherPort

MessageHandler = Callable[[dict[str, Any]], Any]

logger = logging.getLogger(__name__)


def create_redis_client(redis_url: str) -> Redis:
    return Redis.from_url(redis_url, encoding="utf-8", decode_responses=True)


class RedisNotificationPublisher(NotificationPublisherPort):
    def __init__(self, redis: Redis, booking_queue: str, payment_queue: str) -> None:
        self._redis = redis
        self._booking_queue = booking_queue
        self._payment_queue = payment_queue

    def publish_booking(self, notification: BookingNotification) -> None:
        self._push(self._booking_queue, notification.to_json(), notification.booking_id)

    def publish_payment(self, notification: PaymentNotification) -> None:
        self._push(self._payment_queue, notification.to_json(), notification.booking_id)

    def _push(self, queue: str, payload: str, booking_id: str) -> None:
        try:
            self._redis.lpush(queue, payload)
        except RedisError as e:
            raise NotificationPublishError(f"Failed to publish to {queue}: {e}") from e
        logger.info("Notification queued", extra={"queue": queue, "booking_id": booking_id})


class RedisQueueConsumer:
    """Pops messages from the registered queues and routes each to its handler."""

    def __init__(
        self,
        redis: Redis,
        handlers: Mapping[str, MessageHandler],
        poll_seconds: int = 1,
    ) -> None:
        if not handlers:
            raise ValueError("At least one queue handler must be registered")
        self._redis = redis
        self._handlers = dict(handlers)
        self._poll_seconds = poll_seconds
        self._running = False

    @property
    def queues(self) -> list[str]:
        return list(self._handlers)

    def poll_once(self) -> bool:
        """Handle at most one message. Returns False when the poll timed out."""
        item = self._redis.brpop(self.queues, timeout=self._poll_seconds)
        if item is None:
            return False
        queue, raw = item
        dispatch_message(self._handlers, queue, raw)
        return True

    def run_forever(self) -> None:
        self._running = True
        logger.info("Notification consumer started", extra={"queue": ",".join(self.queues)})
        while self._running:
            try:
                self.poll_once()
            except RedisError as e:
                logger.error("Queue poll failed", extra={"error": str(e)})
                self._running = False
                raise
        logger.info("Notification consumer stopped")

    def stop(self) -> None:
        self._running = False


def dispatch_message(handlers: Mapping[str, MessageHandler], queue: str, raw: str | bytes) -> bool:
    handler = handlers.get(queue)
    if handler is None:
        logger.warning("No handler registered for queue", extra={"queue": queue})
        return False
    try:
        payload = json.loads(raw)
    except ValueError as e:
        logger.error("Discarding undecodable message", extra={"queue": queue, "error": str(e)})
        return False
    if not isinstance(payload, dict):
        logger.error("Discarding non-object message", extra={"queue": queue})
        return False
    handler(payload)
    return True
