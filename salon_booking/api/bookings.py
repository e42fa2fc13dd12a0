from __future__ import annotations

import logging
from datetime import date, datetime

from fastapi import APIRouter, BackgroundTasks, Depends, Header, HTTPException, Query

from salon_booking.api.schemas import BookingRequestSchema
from salon_booking.application.dto.booking import BookingDTO, SalonReportDTO
from salon_booking.application.exceptions import (
    BookingNotFoundError,
    BookingValidationError,
    ReferenceNotFoundError,
    UpstreamLookupError,
)
from salon_booking.application.ports.directories import CustomerDirectoryPort
from salon_booking.application.use_cases.create_booking import CreateBookingUseCase
from salon_booking.application.use_cases.query_bookings import QueryBookingsUseCase
from salon_booking.application.use_cases.salon_report import SalonReportUseCase
from salon_booking.application.use_cases.update_booking import UpdateBookingUseCase
from salon_booking.domain.entities.booking import Booking, BookingStatus, PaymentStatus
from salon_booking.domain.entities.booking_draft import BookingDraft
from salon_booking.domain.entities.snapshots import CustomerSnapshot
from salon_booking.wiring.dependencies import (
    get_create_booking_use_case,
    get_customer_directory,
    get_query_bookings_use_case,
    get_salon_report_use_case,
    get_update_booking_use_case,
)


router = APIRouter(prefix="/api/bookings")
logger = logging.getLogger(__name__)


def _to_dtos(bookings: list[Booking]) -> list[BookingDTO]:
    return [BookingDTO.from_entity(b) for b in bookings]


@router.post("", status_code=201, response_model=BookingDTO)
def create_booking(
    req: BookingRequestSchema,
    background_tasks: BackgroundTasks,
    user_id: str = Header(..., alias="User-Id"),
    user_name: str | None = Header(None, alias="User-Name"),
    user_email: str | None = Header(None, alias="User-Email"),
    uc: CreateBookingUseCase = Depends(get_create_booking_use_case),
    customers: CustomerDirectoryPort = Depends(get_customer_directory),
):
    try:
        if user_name and user_email:
            customer = CustomerSnapshot(id=user_id, full_name=user_name, email=user_email)
        else:
            customer = customers.get_customer(user_id)

        booking = uc.execute(
            draft=BookingDraft(start_time=req.start_time, payment_method=req.payment_method),
            customer=customer,
            salon_id=req.salon_id,
            service_ids=req.service_ids,
            dispatch=background_tasks.add_task,
        )
    except (BookingValidationError, UpstreamLookupError) as e:
        logger.info("Booking rejected", extra={"salon_id": req.salon_id, "customer_id": user_id, "error": str(e)})
        raise HTTPException(status_code=400, detail=str(e))

    return BookingDTO.from_entity(booking)


@router.get("", response_model=list[BookingDTO])
def list_bookings(
    customer_id: str | None = Query(None, alias="customerId"),
    salon_id: str | None = Query(None, alias="salonId"),
    uc: QueryBookingsUseCase = Depends(get_query_bookings_use_case),
):
    if bool(customer_id) == bool(salon_id):
        raise HTTPException(status_code=400, detail="Provide exactly one of customerId or salonId")
    if customer_id:
        return _to_dtos(uc.by_customer(customer_id))
    return _to_dtos(uc.by_salon(salon_id))


@router.get("/customer", response_model=list[BookingDTO])
def list_customer_bookings(
    customer_id: str = Query(..., alias="customerId"),
    uc: QueryBookingsUseCase = Depends(get_query_bookings_use_case),
):
    return _to_dtos(uc.by_customer(customer_id))


@router.get("/salon", response_model=list[BookingDTO])
def list_salon_bookings(
    salon_id: str = Query(..., alias="salonId"),
    uc: QueryBookingsUseCase = Depends(get_query_bookings_use_case),
):
    return _to_dtos(uc.by_salon(salon_id))


@router.get("/report", response_model=SalonReportDTO)
def salon_report(
    salon_id: str = Query(..., alias="salonId"),
    uc: SalonReportUseCase = Depends(get_salon_report_use_case),
):
    try:
        report = uc.generate(salon_id)
    except ReferenceNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except UpstreamLookupError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return SalonReportDTO.from_entity(report)


@router.get("/slots/salon/{salon_id}/date/{day}", response_model=list[BookingDTO])
def list_bookings_on_date(
    salon_id: str,
    day: str,
    uc: QueryBookingsUseCase = Depends(get_query_bookings_use_case),
):
    try:
        parsed = _parse_day(day)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid date: {day}")
    return _to_dtos(uc.by_date(salon_id, parsed))


@router.get("/{booking_id}", response_model=BookingDTO)
def get_booking(
    booking_id: str,
    uc: QueryBookingsUseCase = Depends(get_query_bookings_use_case),
):
    try:
        return BookingDTO.from_entity(uc.by_id(booking_id))
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{booking_id}/status", response_model=BookingDTO)
def update_booking_status(
    booking_id: str,
    status: BookingStatus = Query(...),
    uc: UpdateBookingUseCase = Depends(get_update_booking_use_case),
):
    try:
        return BookingDTO.from_entity(uc.update_status(booking_id, status))
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.put("/{booking_id}/payment", response_model=BookingDTO)
def update_payment_status(
    booking_id: str,
    payment_status: PaymentStatus = Query(..., alias="paymentStatus"),
    uc: UpdateBookingUseCase = Depends(get_update_booking_use_case),
):
    try:
        return BookingDTO.from_entity(uc.update_payment_status(booking_id, payment_status))
    except BookingNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _parse_day(value: str) -> date:
    """Accepts ``YYYY-MM-DD`` or a full ISO datetime."""
    try:
        return date.fromisoformat(value)
    except ValueError:
        return datetime.fromisoformat(value).date()
