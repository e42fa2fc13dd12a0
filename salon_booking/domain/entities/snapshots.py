from __future__ import annotations

from dataclasses import dataclass
from datetime import time


@dataclass(frozen=True)
class CustomerSnapshot:
    id: str
    full_name: str
    email: str


@dataclass(frozen=True)
class SalonSnapshot:
    id: str
    name: str
    address: str | None = None
    city: str | None = None
    phone_number: str | None = None
    email: str | None = None
    owner_id: str | None = None
    open_time: time | None = None
    close_time: time | None = None


@dataclass(frozen=True)
class ServiceSnapshot:
    id: str
    name: str
    price: int
    duration_minutes: int
    salon_id: str | None = None
    description: str | None = None
