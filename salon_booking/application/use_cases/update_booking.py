from __future__ import annotations

import logging

from salon_booking.application.exceptions import BookingNotFoundError
from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentStatus


class UpdateBookingUseCase:
    def __init__(self, repository: BookingRepositoryPort) -> None:
        self._repository = repository
        self._logger = logging.getLogger(__name__)

    def update_status(self, booking_id: str, status: BookingStatus) -> Booking:
        booking = self._load(booking_id)
        updated = self._repository.save(booking.with_status(status))
        self._logger.info("Booking status updated", extra={"booking_id": booking_id, "status": status.value})
        return updated

    def update_payment_status(self, booking_id: str, payment_status: PaymentStatus) -> Booking:
        booking = self._load(booking_id)
        updated = self._repository.save(booking.with_payment_status(payment_status))
        self._logger.info(
            "Booking payment status updated",
            extra={"booking_id": booking_id, "status": f"{payment_status.value}/{updated.status.value}"},
        )
        return updated

    def _load(self, booking_id: str) -> Booking:
        booking = self._repository.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking not found with id: {booking_id}")
        return booking
