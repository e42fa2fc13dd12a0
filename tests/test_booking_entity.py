from __future__ import annotations

from datetime import date, datetime

import pytest

from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentMethod, PaymentStatus


def _booking(status: BookingStatus = BookingStatus.PENDING) -> Booking:
    return Booking(
        id="b1",
        customer_id="u1",
        salon_id="S1",
        service_ids=("svc-cut",),
        start_time=datetime(2025, 3, 14, 23, 30),
        end_time=datetime(2025, 3, 15, 0, 15),
        total_price=500,
        payment_method=PaymentMethod.CARD,
        status=status,
    )


@pytest.mark.parametrize(
    "starting_status, payment_status, expected_status",
    [
        (BookingStatus.PENDING, PaymentStatus.PAID, BookingStatus.CONFIRM),
        (BookingStatus.CANCELLED, PaymentStatus.PAID, BookingStatus.CONFIRM),
        (BookingStatus.PENDING, PaymentStatus.FAILED, BookingStatus.CANCELLED),
        (BookingStatus.CONFIRM, PaymentStatus.FAILED, BookingStatus.CANCELLED),
        (BookingStatus.CONFIRM, PaymentStatus.PENDING, BookingStatus.CONFIRM),
        (BookingStatus.SUCCESS, PaymentStatus.PENDING, BookingStatus.SUCCESS),
    ],
)
def test_payment_status_cascades_onto_booking_status(starting_status, payment_status, expected_status):
    updated = _booking(starting_status).with_payment_status(payment_status)

    assert updated.payment_status is payment_status
    assert updated.status is expected_status


def test_with_status_leaves_original_untouched():
    original = _booking()
    updated = original.with_status(BookingStatus.SUCCESS)

    assert updated.status is BookingStatus.SUCCESS
    assert original.status is BookingStatus.PENDING
    assert updated.payment_status is PaymentStatus.PENDING


def test_falls_on_matches_start_or_end_day():
    booking = _booking()

    assert booking.falls_on(date(2025, 3, 14))
    assert booking.falls_on(date(2025, 3, 15))
    assert not booking.falls_on(date(2025, 3, 16))
