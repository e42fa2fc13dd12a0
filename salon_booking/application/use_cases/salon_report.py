from __future__ import annotations

from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.application.ports.directories import SalonDirectoryPort
from salon_booking.domain.entities.booking import BookingStatus, PaymentStatus
from salon_booking.domain.entities.salon_report import SalonReport


class SalonReportUseCase:
    def __init__(self, repository: BookingRepositoryPort, salons: SalonDirectoryPort) -> None:
        self._repository = repository
        self._salons = salons

    def generate(self, salon_id: str) -> SalonReport:
        """
        Aggregate a salon's bookings.

        Earnings count paid bookings that were not cancelled afterwards; refunds are
        paid bookings that ended up cancelled.
        """
        salon = self._salons.get_salon(salon_id)
        bookings = self._repository.list_by_salon(salon_id)

        paid = [b for b in bookings if b.payment_status is PaymentStatus.PAID]
        cancelled = [b for b in bookings if b.status is BookingStatus.CANCELLED]

        return SalonReport(
            salon_id=salon.id,
            salon_name=salon.name,
            total_bookings=len(bookings),
            confirmed_bookings=sum(
                1 for b in bookings if b.status in (BookingStatus.CONFIRM, BookingStatus.SUCCESS)
            ),
            cancelled_bookings=len(cancelled),
            pending_payments=sum(1 for b in bookings if b.payment_status is PaymentStatus.PENDING),
            total_earnings=sum(b.total_price for b in paid if b.status is not BookingStatus.CANCELLED),
            total_refund=sum(b.total_price for b in paid if b.status is BookingStatus.CANCELLED),
        )
