from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass

from salon_booking.application.dto.booking import BookingDTO
from salon_booking.application.dto.notifications import PaymentNotification
from salon_booking.application.ports.booking_service import BookingServicePort
from salon_booking.application.ports.notification_publisher import NotificationPublisherPort
from salon_booking.domain.entities.booking import PaymentStatus
from salon_booking.domain.entities.snapshots import CustomerSnapshot


@dataclass(frozen=True)
class PaymentReceipt:
    payment_id: str
    transaction_id: str
    payment_status: PaymentStatus
    booking: BookingDTO
    notified: bool


class CompletePaymentUseCase:
    def __init__(self, bookings: BookingServicePort, publisher: NotificationPublisherPort) -> None:
        self._bookings = bookings
        self._publisher = publisher
        self._logger = logging.getLogger(__name__)

    def complete(
        self,
        booking_id: str,
        transaction_id: str,
        succeeded: bool,
        customer: CustomerSnapshot,
    ) -> PaymentReceipt:
        # Resolve first so an unknown booking fails before any state change.
        self._bookings.get_booking(booking_id)

        payment_status = PaymentStatus.PAID if succeeded else PaymentStatus.FAILED
        updated = self._bookings.set_payment_status(booking_id, payment_status)
        payment_id = uuid.uuid4().hex

        notified = False
        if payment_status is PaymentStatus.PAID:
            notified = self._notify(
                PaymentNotification(
                    payment_id=payment_id,
                    booking_id=booking_id,
                    customer_email=customer.email,
                    customer_name=customer.full_name,
                    amount=updated.total_price,
                    transaction_id=transaction_id,
                )
            )

        return PaymentReceipt(
            payment_id=payment_id,
            transaction_id=transaction_id,
            payment_status=payment_status,
            booking=updated,
            notified=notified,
        )

    def _notify(self, notification: PaymentNotification) -> bool:
        try:
            self._publisher.publish_payment(notification)
            return True
        except Exception as e:
            self._logger.warning(
                "Failed to publish payment notification",
                extra={"booking_id": notification.booking_id, "error": str(e)},
            )
            return False
