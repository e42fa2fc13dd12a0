from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from salon_booking.domain.entities.booking import PaymentMethod


@dataclass(frozen=True)
class BookingDraft:
    """Caller-supplied part of a booking, before references are resolved."""

    start_time: datetime
    payment_method: PaymentMethod
