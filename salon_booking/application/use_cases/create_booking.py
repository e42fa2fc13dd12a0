from __future__ import annotations

import logging
import uuid
from datetime import timedelta
from typing import Any, Callable, Iterable

from salon_booking.application.dto.notifications import BookingNotification
from salon_booking.application.exceptions import BookingValidationError
from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.application.ports.directories import SalonDirectoryPort, ServiceCatalogPort
from salon_booking.application.ports.notification_publisher import NotificationPublisherPort
from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentStatus
from salon_booking.domain.entities.booking_draft import BookingDraft
from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot, ServiceSnapshot

Dispatch = Callable[..., Any]


class CreateBookingUseCase:
    def __init__(
        self,
        repository: BookingRepositoryPort,
        salons: SalonDirectoryPort,
        services: ServiceCatalogPort,
        publisher: NotificationPublisherPort,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._repository = repository
        self._salons = salons
        self._services = services
        self._publisher = publisher
        self._id_factory = id_factory or (lambda: uuid.uuid4().hex)
        self._logger = logging.getLogger(__name__)

    def execute(
        self,
        draft: BookingDraft,
        customer: CustomerSnapshot,
        salon_id: str,
        service_ids: Iterable[str],
        dispatch: Dispatch | None = None,
    ) -> Booking:
        """
        Resolve references, persist the booking and schedule its notification.

        Lookup failures propagate before anything is stored. ``dispatch`` receives
        ``(self.notify, notification)``; without one the notification is sent inline.
        """
        salon = self._salons.get_salon(salon_id)
        services = [self._services.get_service(service_id) for service_id in _unique(service_ids)]

        booking = self.create_booking(draft, customer, salon, services)

        notification = build_booking_notification(booking, customer, salon, services)
        if dispatch is None:
            self.notify(notification)
        else:
            dispatch(self.notify, notification)
        return booking

    def create_booking(
        self,
        draft: BookingDraft,
        customer: CustomerSnapshot,
        salon: SalonSnapshot,
        services: list[ServiceSnapshot],
    ) -> Booking:
        if not services:
            raise BookingValidationError("At least one service is required to create a booking")

        total_price = sum(service.price for service in services)
        duration = sum(service.duration_minutes for service in services)

        booking = Booking(
            id=self._id_factory(),
            customer_id=customer.id,
            salon_id=salon.id,
            service_ids=tuple(service.id for service in services),
            start_time=draft.start_time,
            end_time=draft.start_time + timedelta(minutes=duration),
            total_price=total_price,
            payment_method=draft.payment_method,
            status=BookingStatus.PENDING,
            payment_status=PaymentStatus.PENDING,
        )
        saved = self._repository.save(booking)
        self._logger.info(
            "Booking created",
            extra={"booking_id": saved.id, "salon_id": saved.salon_id, "customer_id": saved.customer_id},
        )
        return saved

    def notify(self, notification: BookingNotification) -> bool:
        """Publish a booking notification. Returns False instead of raising on failure."""
        try:
            self._publisher.publish_booking(notification)
            return True
        except Exception as e:
            self._logger.warning(
                "Failed to publish booking notification",
                extra={"booking_id": notification.booking_id, "error": str(e)},
            )
            return False


def build_booking_notification(
    booking: Booking,
    customer: CustomerSnapshot,
    salon: SalonSnapshot,
    services: list[ServiceSnapshot],
) -> BookingNotification:
    return BookingNotification(
        booking_id=booking.id,
        customer_email=customer.email,
        customer_name=customer.full_name,
        salon_name=salon.name,
        service_name=", ".join(service.name for service in services),
        start_time=booking.start_time.isoformat(),
        total_price=booking.total_price,
    )


def _unique(ids: Iterable[str]) -> list[str]:
    seen: dict[str, None] = {}
    for item in ids:
        seen.setdefault(item, None)
    return list(seen)
