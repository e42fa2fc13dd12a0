from __future__ import annotations

import logging
from typing import Any

from pydantic import ValidationError

from salon_booking.application.dto.notifications import BookingNotification, PaymentNotification
from salon_booking.application.ports.email_renderer import EmailRendererPort
from salon_booking.application.ports.email_sender import EmailSenderPort

BOOKING_CONFIRMATION_TEMPLATE = "booking_confirmation"
PAYMENT_RECEIPT_TEMPLATE = "payment_receipt"


class SendNotificationEmailUseCase:
    """Turns queued booking/payment events into customer emails."""

    def __init__(self, renderer: EmailRendererPort, sender: EmailSenderPort, currency_symbol: str = "₹") -> None:
        self._renderer = renderer
        self._sender = sender
        self._currency_symbol = currency_symbol
        self._logger = logging.getLogger(__name__)

    def handle_booking(self, payload: dict[str, Any]) -> bool:
        try:
            notification = BookingNotification.model_validate(payload)
        except ValidationError as e:
            self._logger.error("Discarding malformed booking notification", extra={"error": str(e)})
            return False

        self._logger.info(
            "Received booking notification",
            extra={"booking_id": notification.booking_id},
        )
        context = {
            "customer_name": notification.customer_name,
            "salon_name": notification.salon_name,
            "service_name": notification.service_name,
            "start_time": notification.start_time,
            "total_price": notification.total_price,
            "currency": self._currency_symbol,
            "booking_id": notification.booking_id,
        }
        return self._send(notification.customer_email, BOOKING_CONFIRMATION_TEMPLATE, context, notification.booking_id)

    def handle_payment(self, payload: dict[str, Any]) -> bool:
        try:
            notification = PaymentNotification.model_validate(payload)
        except ValidationError as e:
            self._logger.error("Discarding malformed payment notification", extra={"error": str(e)})
            return False

        self._logger.info(
            "Received payment notification",
            extra={"booking_id": notification.booking_id},
        )
        context = {
            "customer_name": notification.customer_name,
            "amount": notification.amount,
            "currency": self._currency_symbol,
            "transaction_id": notification.transaction_id,
            "payment_id": notification.payment_id,
            "booking_id": notification.booking_id,
        }
        return self._send(notification.customer_email, PAYMENT_RECEIPT_TEMPLATE, context, notification.booking_id)

    def _send(self, to_email: str, template: str, context: dict[str, Any], booking_id: str) -> bool:
        try:
            email = self._renderer.render(template, context)
            self._sender.send(to_email, email.subject, email.html, email.text)
        except Exception as e:
            self._logger.error(
                "Failed to send notification email",
                extra={"booking_id": booking_id, "error": str(e)},
            )
            return False
        self._logger.info("Notification email sent", extra={"booking_id": booking_id})
        return True
