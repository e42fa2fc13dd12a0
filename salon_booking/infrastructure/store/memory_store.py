from __future__ import annotations

from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.domain.entities.booking import Booking


class MemoryBookingRepository(BookingRepositoryPort):
    def __init__(self) -> None:
        self._bookings: dict[str, Booking] = {}

    def save(self, booking: Booking) -> Booking:
        self._bookings[booking.id] = booking
        return booking

    def get(self, booking_id: str) -> Booking | None:
        return self._bookings.get(booking_id)

    def list_by_customer(self, customer_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.customer_id == customer_id]

    def list_by_salon(self, salon_id: str) -> list[Booking]:
        return [b for b in self._bookings.values() if b.salon_id == salon_id]

    def __len__(self) -> int:
        return len(self._bookings)
