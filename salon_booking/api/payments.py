from __future__ import annotations

from fastapi import APIRouter, Depends, Header, HTTPException

from salon_booking.api.schemas import PaymentCompletionSchema, PaymentReceiptSchema
from salon_booking.application.dto.booking import BookingDTO
from salon_booking.application.exceptions import BookingNotFoundError, UpstreamLookupError
from salon_booking.application.ports.booking_service import BookingServicePort
from salon_booking.application.use_cases.complete_payment import CompletePaymentUseCase
from salon_booking.domain.entities.snapshots import CustomerSnapshot
from salon_booking.wiring.dependencies import get_booking_service_client, get_complete_payment_use_case


router = APIRouter(prefix="/api/payments")


@router.get("/bookings/{booking_id}", response_model=BookingDTO)
def get_booking(
    booking_id: str,
    bookings: BookingServicePort = Depends(get_booking_service_client),
):
    try:
        return bookings.get_booking(booking_id)
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))


@router.post("/{booking_id}/complete", response_model=PaymentReceiptSchema)
def complete_payment(
    booking_id: str,
    req: PaymentCompletionSchema,
    user_id: str = Header(..., alias="User-Id"),
    user_name: str = Header(..., alias="User-Name"),
    user_email: str = Header(..., alias="User-Email"),
    uc: CompletePaymentUseCase = Depends(get_complete_payment_use_case),
):
    try:
        receipt = uc.complete(
            booking_id=booking_id,
            transaction_id=req.transaction_id,
            succeeded=req.succeeded,
            customer=CustomerSnapshot(id=user_id, full_name=user_name, email=user_email),
        )
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))

    return PaymentReceiptSchema(
        payment_id=receipt.payment_id,
        transaction_id=receipt.transaction_id,
        payment_status=receipt.payment_status,
        booking=receipt.booking,
        notified=receipt.notified,
    )
