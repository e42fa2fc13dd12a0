from fastapi import FastAPI

from salon_booking.api.bookings import router as bookings_router
from salon_booking.core.logging import configure_logging

configure_logging()

app = FastAPI(title="Salon Booking Service", version="1.0.0")

app.include_router(bookings_router, tags=["bookings"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
