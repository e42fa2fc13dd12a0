from __future__ import annotations

from datetime import timedelta

import pytest

from conftest import CUSTOMER, HAIRCUT, SALON, SPA, START, FailingPublisher, sequential_ids
from salon_booking.application.dto.notifications import BookingNotification
from salon_booking.application.exceptions import BookingValidationError, ReferenceNotFoundError
from salon_booking.application.use_cases.create_booking import CreateBookingUseCase
from salon_booking.domain.entities.booking import BookingStatus, PaymentMethod, PaymentStatus


def test_total_price_is_sum_of_service_prices(create_use_case, draft, repository):
    """Salon S1 with services priced 500 and 300 books at 800, pending."""
    booking = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut", "svc-spa"])

    assert booking.total_price == 800
    assert booking.status is BookingStatus.PENDING
    assert booking.payment_status is PaymentStatus.PENDING
    assert booking.payment_method is PaymentMethod.UPI
    assert booking.start_time == START
    assert booking.end_time == START + timedelta(minutes=75)
    assert repository.get(booking.id) == booking


def test_duplicate_service_ids_are_booked_once(create_use_case, draft):
    booking = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-spa", "svc-cut", "svc-spa"])

    assert booking.service_ids == ("svc-spa", "svc-cut")
    assert booking.total_price == 800


def test_unknown_salon_fails_and_persists_nothing(create_use_case, draft, repository, queue):
    with pytest.raises(ReferenceNotFoundError):
        create_use_case.execute(draft, CUSTOMER, "missing-salon", ["svc-cut"])

    assert len(repository) == 0
    assert queue.pending() == []


def test_unknown_service_fails_and_persists_nothing(create_use_case, draft, repository, queue):
    with pytest.raises(ReferenceNotFoundError) as exc:
        create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut", "svc-nope"])

    assert "svc-nope" in str(exc.value)
    assert len(repository) == 0
    assert queue.pending() == []


def test_empty_service_list_is_rejected(create_use_case, draft, repository):
    with pytest.raises(BookingValidationError):
        create_use_case.create_booking(draft, CUSTOMER, SALON, [])

    assert len(repository) == 0


def test_notification_is_published_after_persisting(create_use_case, draft, queue):
    booking = create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut", "svc-spa"])

    pending = queue.pending(queue.booking_queue)
    assert len(pending) == 1
    notification = BookingNotification.model_validate_json(pending[0])
    assert notification.booking_id == booking.id
    assert notification.customer_email == "asha@example.com"
    assert notification.customer_name == "Asha Rao"
    assert notification.salon_name == "Glow Studio"
    assert notification.service_name == "Haircut, Hair Spa"
    assert notification.start_time == START.isoformat()
    assert notification.total_price == 800


def test_notification_payload_uses_camel_case_keys(create_use_case, draft, queue):
    create_use_case.execute(draft, CUSTOMER, "S1", ["svc-cut"])

    raw = queue.pending()[0]
    assert '"bookingId"' in raw
    assert '"customerEmail"' in raw
    assert '"totalPrice":500' in raw


def test_publish_failure_does_not_fail_booking(repository, directory, draft):
    use_case = CreateBookingUseCase(
        repository=repository,
        salons=directory,
        services=directory,
        publisher=FailingPublisher(),
        id_factory=sequential_ids(),
    )

    booking = use_case.execute(draft, CUSTOMER, "S1", [HAIRCUT.id, SPA.id])

    assert repository.get(booking.id) == booking
    assert booking.total_price == 800


def test_dispatch_receives_notify_callable(create_use_case, draft, queue):
    scheduled = []

    booking = create_use_case.execute(
        draft, CUSTOMER, "S1", ["svc-cut"], dispatch=lambda fn, *args: scheduled.append((fn, args))
    )

    assert queue.pending() == []
    assert len(scheduled) == 1
    fn, args = scheduled[0]
    assert fn(*args) is True
    assert BookingNotification.model_validate_json(queue.pending()[0]).booking_id == booking.id


def test_notify_returns_false_when_publisher_raises(repository, directory):
    use_case = CreateBookingUseCase(repository, directory, directory, FailingPublisher())
    notification = BookingNotification(
        booking_id="b1",
        customer_email="asha@example.com",
        customer_name="Asha Rao",
        salon_name="Glow Studio",
        service_name="Haircut",
        start_time=START.isoformat(),
        total_price=500,
    )

    assert use_case.notify(notification) is False
