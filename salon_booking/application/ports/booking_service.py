from abc import ABC, abstractmethod

from salon_booking.application.dto.booking import BookingDTO
from salon_booking.domain.entities.booking import PaymentStatus


class BookingServicePort(ABC):
    """Booking service as seen from the payment service."""

    @abstractmethod
    def get_booking(self, booking_id: str) -> BookingDTO:
        raise NotImplementedError

    @abstractmethod
    def set_payment_status(self, booking_id: str, payment_status: PaymentStatus) -> BookingDTO:
        raise NotImplementedError
