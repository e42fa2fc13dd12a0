from __future__ import annotations

import logging

import httpx
from pydantic import ValidationError

from salon_booking.application.dto.booking import BookingDTO
from salon_booking.application.exceptions import BookingNotFoundError, UpstreamLookupError
from salon_booking.application.ports.booking_service import BookingServicePort
from salon_booking.domain.entities.booking import PaymentStatus


class HttpBookingClient(BookingServicePort):
    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = httpx.Client(timeout=timeout, transport=transport)
        self._logger = logging.getLogger(__name__)

    def get_booking(self, booking_id: str) -> BookingDTO:
        return self._request("GET", f"/api/bookings/{booking_id}", booking_id)

    def set_payment_status(self, booking_id: str, payment_status: PaymentStatus) -> BookingDTO:
        return self._request(
            "PUT",
            f"/api/bookings/{booking_id}/payment",
            booking_id,
            params={"paymentStatus": payment_status.value},
        )

    def _request(self, method: str, path: str, booking_id: str, params: dict[str, str] | None = None) -> BookingDTO:
        try:
            response = self._client.request(method, f"{self._base_url}{path}", params=params)
        except httpx.HTTPError as e:
            self._logger.error("Booking service unreachable", extra={"booking_id": booking_id, "error": str(e)})
            raise UpstreamLookupError(f"Error calling Booking service: {e}") from e

        if response.status_code == 404:
            raise BookingNotFoundError(f"Booking not found with id: {booking_id}")
        if response.status_code >= 400:
            detail = _detail(response)
            self._logger.error(
                "Booking service request failed",
                extra={"booking_id": booking_id, "status": response.status_code, "error": detail},
            )
            raise UpstreamLookupError(f"Booking service returned HTTP {response.status_code}: {detail}")

        try:
            return BookingDTO.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            raise UpstreamLookupError(f"Invalid booking payload: {e}") from e

    def close(self) -> None:
        self._client.close()


def _detail(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text[:200]
    if isinstance(body, dict) and "detail" in body:
        return str(body["detail"])
    return str(body)[:200]
