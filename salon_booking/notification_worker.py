"""
Notification service worker.

Usage:
  python -m salon_booking.notification_worker          # consume until interrupted
  python -m salon_booking.notification_worker --once   # handle at most one message

Reads booking and payment events from the Redis queues named by BOOKING_QUEUE
and PAYMENT_QUEUE and sends the matching customer email.
"""

from __future__ import annotations

import argparse
import logging
import sys

from salon_booking.application.use_cases.send_notification_email import SendNotificationEmailUseCase
from salon_booking.core.config import settings
from salon_booking.core.logging import configure_logging
from salon_booking.infrastructure.messaging.redis_queue import MessageHandler, RedisQueueConsumer, create_redis_client
from salon_booking.wiring.dependencies import get_send_notification_email_use_case


logger = logging.getLogger(__name__)


def build_handlers(use_case: SendNotificationEmailUseCase) -> dict[str, MessageHandler]:
    return {
        settings.BOOKING_QUEUE: use_case.handle_booking,
        settings.PAYMENT_QUEUE: use_case.handle_payment,
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Consume booking/payment events and send emails.")
    parser.add_argument("--once", action="store_true", help="handle at most one message and exit")
    parser.add_argument("--log-level", default=None, help="override LOG_LEVEL")
    args = parser.parse_args(argv)

    configure_logging(args.log_level)

    if not settings.REDIS_URL:
        logger.error("REDIS_URL is required to run the notification worker")
        return 2

    consumer = RedisQueueConsumer(
        create_redis_client(settings.REDIS_URL),
        handlers=build_handlers(get_send_notification_email_use_case()),
        poll_seconds=settings.QUEUE_POLL_SECONDS,
    )

    if args.once:
        consumer.poll_once()
        return 0

    try:
        consumer.run_forever()
    except KeyboardInterrupt:
        consumer.stop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
