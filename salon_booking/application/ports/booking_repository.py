from abc import ABC, abstractmethod

from salon_booking.domain.entities.booking import Booking


class BookingRepositoryPort(ABC):
    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """Insert or replace a booking. Returns the stored booking."""
        raise NotImplementedError

    @abstractmethod
    def get(self, booking_id: str) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def list_by_customer(self, customer_id: str) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def list_by_salon(self, salon_id: str) -> list[Booking]:
        raise NotImplementedError
