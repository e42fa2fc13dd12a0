from __future__ import annotations

import logging
from datetime import time
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from salon_booking.application.exceptions import ReferenceNotFoundError, UpstreamLookupError
from salon_booking.application.ports.directories import (
    CustomerDirectoryPort,
    SalonDirectoryPort,
    ServiceCatalogPort,
)
from salon_booking.domain.entities.snapshots import CustomerSnapshot, SalonSnapshot, ServiceSnapshot

PayloadT = TypeVar("PayloadT", bound=BaseModel)


class _Payload(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    @field_validator("id", "salon_id", "owner_id", mode="before", check_fields=False)
    @classmethod
    def _stringify_id(cls, value: Any) -> Any:
        if value is None or isinstance(value, str):
            return value
        return str(value)


class UserPayload(_Payload):
    id: str
    full_name: str
    email: str


class SalonPayload(_Payload):
    id: str
    name: str
    address: str | None = None
    city: str | None = None
    phone_number: str | None = None
    email: str | None = None
    owner_id: str | None = None
    open_time: time | None = None
    close_time: time | None = None


class ServicePayload(_Payload):
    id: str
    name: str
    price: int
    duration: int
    salon_id: str | None = None
    description: str | None = None


class ServiceLookupClient:
    """By-id GET against one sibling service, mapping failures onto lookup errors."""

    def __init__(
        self,
        base_url: str,
        resource_path: str,
        resource_name: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._resource_path = resource_path.strip("/")
        self._resource_name = resource_name
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def fetch(self, resource_id: str, model: type[PayloadT]) -> PayloadT:
        url = f"{self._base_url}/{self._resource_path}/{resource_id}"
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            self._logger.error(f"{self._resource_name} service unreachable", extra={"error": str(e)})
            raise UpstreamLookupError(f"Error calling {self._resource_name} service: {e}") from e

        if response.status_code == 404:
            raise ReferenceNotFoundError(f"{self._resource_name} not found with id: {resource_id}")
        if response.status_code >= 400:
            self._logger.error(
                f"{self._resource_name} lookup failed",
                extra={"status": response.status_code, "error": response.text[:200]},
            )
            raise UpstreamLookupError(
                f"Error calling {self._resource_name} service: HTTP {response.status_code}"
            )

        try:
            return model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamLookupError(f"Invalid {self._resource_name} payload: {e}") from e

    def close(self) -> None:
        self._client.close()


class HttpCustomerDirectory(CustomerDirectoryPort):
    def __init__(self, client: ServiceLookupClient) -> None:
        self._client = client

    def get_customer(self, customer_id: str) -> CustomerSnapshot:
        payload = self._client.fetch(customer_id, UserPayload)
        return CustomerSnapshot(id=payload.id, full_name=payload.full_name, email=payload.email)


class HttpSalonDirectory(SalonDirectoryPort):
    def __init__(self, client: ServiceLookupClient) -> None:
        self._client = client

    def get_salon(self, salon_id: str) -> SalonSnapshot:
        payload = self._client.fetch(salon_id, SalonPayload)
        return SalonSnapshot(**payload.model_dump())


class HttpServiceCatalog(ServiceCatalogPort):
    def __init__(self, client: ServiceLookupClient) -> None:
        self._client = client

    def get_service(self, service_id: str) -> ServiceSnapshot:
        payload = self._client.fetch(service_id, ServicePayload)
        return ServiceSnapshot(
            id=payload.id,
            name=payload.name,
            price=payload.price,
            duration_minutes=payload.duration,
            salon_id=payload.salon_id,
            description=payload.description,
        )
