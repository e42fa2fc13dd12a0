from __future__ import annotations

from datetime import date, datetime

import pytest

from conftest import CUSTOMER
from salon_booking.application.exceptions import BookingNotFoundError, ReferenceNotFoundError
from salon_booking.application.use_cases.query_bookings import QueryBookingsUseCase
from salon_booking.application.use_cases.salon_report import SalonReportUseCase
from salon_booking.application.use_cases.update_booking import UpdateBookingUseCase
from salon_booking.domain.entities.booking import BookingStatus, PaymentMethod, PaymentStatus
from salon_booking.domain.entities.booking_draft import BookingDraft
from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot


def test_update_status_persists(create_use_case, draft, repository):
    booking = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut"])

    updated = UpdateBookingUseCase(repository).update_status(booking.id, BookingStatus.SUCCESS)

    assert updated.status is BookingStatus.SUCCESS
    assert repository.get(booking.id).status is BookingStatus.SUCCESS


@pytest.mark.parametrize(
    "payment_status, expected_status",
    [
        (PaymentStatus.PAID, BookingStatus.CONFIRM),
        (PaymentStatus.FAILED, BookingStatus.CANCELLED),
        (PaymentStatus.PENDING, BookingStatus.PENDING),
    ],
)
def test_update_payment_status_applies_cascade(create_use_case, draft, repository, payment_status, expected_status):
    booking = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut"])

    updated = UpdateBookingUseCase(repository).update_payment_status(booking.id, payment_status)

    assert updated.payment_status is payment_status
    assert updated.status is expected_status
    assert repository.get(booking.id) == updated


def test_updates_on_unknown_booking_raise_not_found(repository):
    use_case = UpdateBookingUseCase(repository)

    with pytest.raises(BookingNotFoundError):
        use_case.update_status("nope", BookingStatus.CONFIRM)
    with pytest.raises(BookingNotFoundError):
        use_case.update_payment_status("nope", PaymentStatus.PAID)


def test_by_id_raises_not_found_instead_of_empty_record(repository):
    with pytest.raises(BookingNotFoundError):
        QueryBookingsUseCase(repository).by_id("missing")


def test_queries_by_customer_salon_and_date(create_use_case, repository, directory):
    directory.add_salon(SalonSnapshot(id="S2", name="Other Salon"))
    other = CustomerSnapshot(id="u2", full_name="Ravi", email="ravi@example.com")

    late = create_use_case.execute(
        BookingDraft(datetime(2025, 3, 15, 16, 0), PaymentMethod.CARD), CUSTOMER, "S1", ["svc-cut"]
    )
    early = create_use_case.execute(
        BookingDraft(datetime(2025, 3, 14, 9, 0), PaymentMethod.CARD), other, "S1", ["svc-spa"]
    )
    elsewhere = create_use_case.execute(
        BookingDraft(datetime(2025, 3, 14, 9, 0), PaymentMethod.CASH), CUSTOMER, "S2", ["svc-spa"]
    )

    query = QueryBookingsUseCase(repository)

    assert [b.id for b in query.by_customer("u1")] == [elsewhere.id, late.id]
    assert [b.id for b in query.by_salon("S1")] == [early.id, late.id]
    assert [b.id for b in query.by_date("S1", date(2025, 3, 14))] == [early.id]
    assert query.by_date("S1", date(2025, 3, 16)) == []
    assert query.by_customer("nobody") == []


def test_salon_report_aggregates_bookings(create_use_case, draft, repository, directory):
    updates = UpdateBookingUseCase(repository)
    paid = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut", "svc-spa"])  # 800
    refunded = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut"])  # 500
    failed = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-spa"])  # 300
    create_use_case.execute(draft, CUSTOMER, "S1", ["svc-spa"])  # 300, still pending

    updates.update_payment_status(paid.id, PaymentStatus.PAID)
    updates.update_payment_status(refunded.id, PaymentStatus.PAID)
    updates.update_status(refunded.id, BookingStatus.CANCELLED)
    updates.update_payment_status(failed.id, PaymentStatus.FAILED)

    report = SalonReportUseCase(repository, directory).generate("S1")

    assert report.salon_name == "Glow Studio"
    assert report.total_bookings == 4
    assert report.confirmed_bookings == 1
    assert report.cancelled_bookings == 2
    assert report.pending_payments == 1
    assert report.total_earnings == 800
    assert report.total_refund == 500


def test_salon_report_for_unknown_salon_raises(repository, directory):
    with pytest.raises(ReferenceNotFoundError):
        SalonReportUseCase(repository, directory).generate("ghost")


def test_salon_report_for_salon_without_bookings_is_zeroed(repository, directory):
    report = SalonReportUseCase(repository, directory).generate("S1")

    assert report.total_bookings == 0
    assert report.total_earnings == 0
