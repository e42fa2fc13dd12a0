from __future__ import annotations

import json
import logging
import threading
from datetime import datetime
from pathlib import Path
from typing import Any

from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentMethod, PaymentStatus


class JsonBookingRepository(BookingRepositoryPort):
    """One JSON document per booking under ``data_dir``."""

    def __init__(self, data_dir: str = "./data/bookings") -> None:
        self._data_dir = Path(data_dir)
        self._data_dir.mkdir(parents=True, exist_ok=True)
        self._locks: dict[str, threading.Lock] = {}
        self._lock_lock = threading.Lock()  # Lock for managing locks dict
        self._logger = logging.getLogger(__name__)

    def _get_lock(self, booking_id: str) -> threading.Lock:
        """Get or create a lock for a booking id."""
        with self._lock_lock:
            if booking_id not in self._locks:
                self._locks[booking_id] = threading.Lock()
            return self._locks[booking_id]

    def _get_file_path(self, booking_id: str) -> Path:
        if not booking_id.isalnum():
            raise ValueError(f"Invalid booking id: {booking_id!r}")
        return self._data_dir / f"{booking_id}.json"

    def _write_document(self, booking_id: str, data: dict[str, Any]) -> None:
        """Save a document atomically."""
        file_path = self._get_file_path(booking_id)
        temp_path = file_path.with_suffix(".json.tmp")

        try:
            with open(temp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            temp_path.replace(file_path)
        except Exception:
            if temp_path.exists():
                temp_path.unlink(missing_ok=True)
            raise

    def _read_document(self, file_path: Path) -> Booking | None:
        try:
            with open(file_path, "r", encoding="utf-8") as f:
                return self._deserialize(json.load(f))
        except (json.JSONDecodeError, OSError, KeyError, ValueError) as e:
            self._logger.error("Skipping unreadable booking document", extra={"error": f"{file_path.name}: {e}"})
            return None

    def _serialize(self, booking: Booking) -> dict[str, Any]:
        return {
            "id": booking.id,
            "customer_id": booking.customer_id,
            "salon_id": booking.salon_id,
            "service_ids": list(booking.service_ids),
            "start_time": booking.start_time.isoformat(),
            "end_time": booking.end_time.isoformat(),
            "total_price": booking.total_price,
            "payment_method": booking.payment_method.value,
            "status": booking.status.value,
            "payment_status": booking.payment_status.value,
            "version": 1,
        }

    def _deserialize(self, data: dict[str, Any]) -> Booking:
        return Booking(
            id=data["id"],
            customer_id=data["customer_id"],
            salon_id=data["salon_id"],
            service_ids=tuple(data.get("service_ids", [])),
            start_time=datetime.fromisoformat(data["start_time"]),
            end_time=datetime.fromisoformat(data["end_time"]),
            total_price=int(data["total_price"]),
            payment_method=PaymentMethod(data["payment_method"]),
            status=BookingStatus(data.get("status", BookingStatus.PENDING.value)),
            payment_status=PaymentStatus(data.get("payment_status", PaymentStatus.PENDING.value)),
        )

    def _scan(self) -> list[Booking]:
        bookings: list[Booking] = []
        for file_path in sorted(self._data_dir.glob("*.json")):
            booking = self._read_document(file_path)
            if booking is not None:
                bookings.append(booking)
        return bookings

    def save(self, booking: Booking) -> Booking:
        self._get_file_path(booking.id)
        with self._get_lock(booking.id):
            self._write_document(booking.id, self._serialize(booking))
        return booking

    def get(self, booking_id: str) -> Booking | None:
        try:
            file_path = self._get_file_path(booking_id)
        except ValueError:
            return None
        with self._get_lock(booking_id):
            if not file_path.exists():
                return None
            return self._read_document(file_path)

    def list_by_customer(self, customer_id: str) -> list[Booking]:
        # Full scan; fine for the dev-sized data sets this store is meant for.
        return [b for b in self._scan() if b.customer_id == customer_id]

    def list_by_salon(self, salon_id: str) -> list[Booking]:
        return [b for b in self._scan() if b.salon_id == salon_id]
