from fastapi import FastAPI

from salon_booking.api.payments import router as payments_router
from salon_booking.core.logging import configure_logging

configure_logging()

app = FastAPI(title="Salon Payment Service", version="1.0.0")

app.include_router(payments_router, tags=["payments"])


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}
