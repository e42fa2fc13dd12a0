from __future__ import annotations

from datetime import date

from salon_booking.application.exceptions import BookingNotFoundError
from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.domain.entities.booking import Booking


class QueryBookingsUseCase:
    def __init__(self, repository: BookingRepositoryPort) -> None:
        self._repository = repository

    def by_id(self, booking_id: str) -> Booking:
        booking = self._repository.get(booking_id)
        if booking is None:
            raise BookingNotFoundError(f"Booking not found with id: {booking_id}")
        return booking

    def by_customer(self, customer_id: str) -> list[Booking]:
        return _chronological(self._repository.list_by_customer(customer_id))

    def by_salon(self, salon_id: str) -> list[Booking]:
        return _chronological(self._repository.list_by_salon(salon_id))

    def by_date(self, salon_id: str, day: date) -> list[Booking]:
        """Bookings of a salon that start or end on the given day."""
        return [b for b in self.by_salon(salon_id) if b.falls_on(day)]


def _chronological(bookings: list[Booking]) -> list[Booking]:
    return sorted(bookings, key=lambda b: b.start_time)
