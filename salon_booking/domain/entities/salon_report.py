from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class SalonReport:
    salon_id: str
    salon_name: str
    total_bookings: int = 0
    confirmed_bookings: int = 0
    cancelled_bookings: int = 0
    pending_payments: int = 0
    total_earnings: int = 0
    total_refund: int = 0
