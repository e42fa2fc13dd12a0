from __future__ import annotations

from datetime import datetime
from itertools import count

import pytest
from fastapi.testclient import TestClient

from salon_booking.application.use_cases.create_booking import CreateBookingUseCase
from salon_booking.application.use_cases.query_bookings import QueryBookingsUseCase
from salon_booking.application.use_cases.salon_report import SalonReportUseCase
from salon_booking.application.use_cases.update_booking import UpdateBookingUseCase
from salon_booking.domain.entities.booking import PaymentMethod
from salon_booking.domain.entities.booking_draft import BookingDraft
from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot, ServiceSnapshot
from salon_booking.infrastructure.directories.memory_directories import MemoryDirectory
from salon_booking.infrastructure.messaging.memory_queue import MemoryNotificationQueue
from salon_booking.infrastructure.store.memory_store import MemoryBookingRepository
from salon_booking.main import app
from salon_booking.wiring import dependencies

START = datetime(2025, 3, 14, 10, 30)

CUSTOMER = CustomerSnapshot(id="u1", full_name="Asha Rao", email="asha@example.com")
SALON = SalonSnapshot(id="S1", name="Glow Studio", city="Pune")
HAIRCUT = ServiceSnapshot(id="svc-cut", name="Haircut", price=500, duration_minutes=45, salon_id="S1")
SPA = ServiceSnapshot(id="svc-spa", name="Hair Spa", price=300, duration_minutes=30, salon_id="S1")


class FailingPublisher(MemoryNotificationQueue):
    def publish_booking(self, notification):
        raise RuntimeError("broker down")

    def publish_payment(self, notification):
        raise RuntimeError("broker down")


def sequential_ids():
    counter = count(1)
    return lambda: f"b{next(counter)}"


@pytest.fixture
def directory() -> MemoryDirectory:
    return MemoryDirectory(customers=[CUSTOMER], salons=[SALON], services=[HAIRCUT, SPA])


@pytest.fixture
def repository() -> MemoryBookingRepository:
    return MemoryBookingRepository()


@pytest.fixture
def queue() -> MemoryNotificationQueue:
    return MemoryNotificationQueue()


@pytest.fixture
def draft() -> BookingDraft:
    return BookingDraft(start_time=START, payment_method=PaymentMethod.UPI)


@pytest.fixture
def create_use_case(repository, directory, queue) -> CreateBookingUseCase:
    return CreateBookingUseCase(
        repository=repository,
        salons=directory,
        services=directory,
        publisher=queue,
        id_factory=sequential_ids(),
    )


@pytest.fixture
def client(repository, directory, queue, create_use_case):
    overrides = {
        dependencies.get_create_booking_use_case: lambda: create_use_case,
        dependencies.get_customer_directory: lambda: directory,
        dependencies.get_query_bookings_use_case: lambda: QueryBookingsUseCase(repository),
        dependencies.get_update_booking_use_case: lambda: UpdateBookingUseCase(repository),
        dependencies.get_salon_report_use_case: lambda: SalonReportUseCase(repository, directory),
    }
    app.dependency_overrides.update(overrides)
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
