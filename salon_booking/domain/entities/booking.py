from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date, datetime
from enum import Enum


class BookingStatus(str, Enum):
    PENDING = "PENDING"
    CONFIRM = "CONFIRM"
    CANCELLED = "CANCELLED"
    SUCCESS = "SUCCESS"


class PaymentStatus(str, Enum):
    PENDING = "PENDING"
    PAID = "PAID"
    FAILED = "FAILED"


class PaymentMethod(str, Enum):
    CARD = "CARD"
    UPI = "UPI"
    WALLET = "WALLET"
    CASH = "CASH"


# Payment outcomes that override whatever booking status was set before.
PAYMENT_STATUS_CASCADE: dict[PaymentStatus, BookingStatus] = {
    PaymentStatus.PAID: BookingStatus.CONFIRM,
    PaymentStatus.FAILED: BookingStatus.CANCELLED,
}


@dataclass(frozen=True)
class Booking:
    id: str
    customer_id: str
    salon_id: str
    service_ids: tuple[str, ...]
    start_time: datetime
    end_time: datetime
    total_price: int
    payment_method: PaymentMethod
    status: BookingStatus = BookingStatus.PENDING
    payment_status: PaymentStatus = PaymentStatus.PENDING

    def with_status(self, status: BookingStatus) -> Booking:
        return replace(self, status=status)

    def with_payment_status(self, payment_status: PaymentStatus) -> Booking:
        """Apply a payment outcome, cascading PAID/FAILED onto the booking status."""
        status = PAYMENT_STATUS_CASCADE.get(payment_status, self.status)
        return replace(self, payment_status=payment_status, status=status)

    def falls_on(self, day: date) -> bool:
        return self.start_time.date() == day or self.end_time.date() == day
