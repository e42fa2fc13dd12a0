from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentMethod, PaymentStatus
from salon_booking.domain.entities.salon_report import SalonReport


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingDTO(_CamelModel):
    id: str
    customer_id: str
    salon_id: str
    service_ids: list[str]
    start_time: datetime
    end_time: datetime
    total_price: int
    payment_method: PaymentMethod
    status: BookingStatus
    payment_status: PaymentStatus

    @classmethod
    def from_entity(cls, booking: Booking) -> BookingDTO:
        return cls(
            id=booking.id,
            customer_id=booking.customer_id,
            salon_id=booking.salon_id,
            service_ids=list(booking.service_ids),
            start_time=booking.start_time,
            end_time=booking.end_time,
            total_price=booking.total_price,
            payment_method=booking.payment_method,
            status=booking.status,
            payment_status=booking.payment_status,
        )


class SalonReportDTO(_CamelModel):
    salon_id: str
    salon_name: str
    total_bookings: int
    confirmed_bookings: int
    cancelled_bookings: int
    pending_payments: int
    total_earnings: int
    total_refund: int

    @classmethod
    def from_entity(cls, report: SalonReport) -> SalonReportDTO:
        return cls(
            salon_id=report.salon_id,
            salon_name=report.salon_name,
            total_bookings=report.total_bookings,
            confirmed_bookings=report.confirmed_bookings,
            cancelled_bookings=report.cancelled_bookings,
            pending_payments=report.pending_payments,
            total_earnings=report.total_earnings,
            total_refund=report.total_refund,
        )
