from __future__ import annotations

import json
import logging
from datetime import time
from pathlib import Path
from typing import Any

from salon_booking.application.exceptions import ReferenceNotFoundError
from salon_booking.application.ports.directories import (
    CustomerDirectoryPort,
    SalonDirectoryPort,
    ServiceCatalogPort,
)
from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot, ServiceSnapshot


class MemoryDirectory(CustomerDirectoryPort, SalonDirectoryPort, ServiceCatalogPort):
    """Stands in for the user, salon and service-offering services in dev and tests."""

    def __init__(
        self,
        customers: list[CustomerSnapshot] | None = None,
        salons: list[SalonSnapshot] | None = None,
        services: list[ServiceSnapshot] | None = None,
    ) -> None:
        self._customers = {c.id: c for c in customers or []}
        self._salons = {s.id: s for s in salons or []}
        self._services = {s.id: s for s in services or []}

    def add_customer(self, customer: CustomerSnapshot) -> None:
        self._customers[customer.id] = customer

    def add_salon(self, salon: SalonSnapshot) -> None:
        self._salons[salon.id] = salon

    def add_service(self, service: ServiceSnapshot) -> None:
        self._services[service.id] = service

    def get_customer(self, customer_id: str) -> CustomerSnapshot:
        customer = self._customers.get(customer_id)
        if customer is None:
            raise ReferenceNotFoundError(f"User not found with id: {customer_id}")
        return customer

    def get_salon(self, salon_id: str) -> SalonSnapshot:
        salon = self._salons.get(salon_id)
        if salon is None:
            raise ReferenceNotFoundError(f"Salon not found with id: {salon_id}")
        return salon

    def get_service(self, service_id: str) -> ServiceSnapshot:
        service = self._services.get(service_id)
        if service is None:
            raise ReferenceNotFoundError(f"Service not found with id: {service_id}")
        return service


def load_directory(seed_file: str | None) -> MemoryDirectory:
    """
    Build a MemoryDirectory from a JSON seed file with ``users``, ``salons`` and
    ``services`` arrays. A missing file yields an empty directory.
    """
    if not seed_file or not Path(seed_file).exists():
        return MemoryDirectory()

    with open(seed_file, "r", encoding="utf-8") as f:
        data: dict[str, Any] = json.load(f)

    customers = [
        CustomerSnapshot(id=str(u["id"]), full_name=u["fullName"], email=u["email"])
        for u in data.get("users", [])
    ]
    salons = [
        SalonSnapshot(
            id=str(s["id"]),
            name=s["name"],
            address=s.get("address"),
            city=s.get("city"),
            phone_number=s.get("phoneNumber"),
            email=s.get("email"),
            owner_id=str(s["ownerId"]) if s.get("ownerId") is not None else None,
            open_time=time.fromisoformat(s["openTime"]) if s.get("openTime") else None,
            close_time=time.fromisoformat(s["closeTime"]) if s.get("closeTime") else None,
        )
        for s in data.get("salons", [])
    ]
    services = [
        ServiceSnapshot(
            id=str(s["id"]),
            name=s["name"],
            price=int(s["price"]),
            duration_minutes=int(s["duration"]),
            salon_id=str(s["salonId"]) if s.get("salonId") is not None else None,
            description=s.get("description"),
        )
        for s in data.get("services", [])
    ]
    logging.getLogger(__name__).info(
        "Loaded directory seed (%s users, %s salons, %s services)", len(customers), len(salons), len(services)
    )
    return MemoryDirectory(customers=customers, salons=salons, services=services)
