from __future__ import annotations

from abc import ABC, abstractmethod

from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot, ServiceSnapshot


class CustomerDirectoryPort(ABC):
    @abstractmethod
    def get_customer(self, customer_id: str) -> CustomerSnapshot:
        """Fetch a user by id. Raises ReferenceNotFoundError or UpstreamLookupError."""
        raise NotImplementedError


class SalonDirectoryPort(ABC):
    @abstractmethod
    def get_salon(self, salon_id: str) -> SalonSnapshot:
        """Fetch a salon by id. Raises ReferenceNotFoundError or UpstreamLookupError."""
        raise NotImplementedError


class ServiceCatalogPort(ABC):
    @abstractmethod
    def get_service(self, service_id: str) -> ServiceSnapshot:
        """Fetch a service offering by id. Raises ReferenceNotFoundError or UpstreamLookupError."""
        raise NotImplementedError
