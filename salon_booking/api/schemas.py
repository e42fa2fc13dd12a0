from datetime import datetime, timezone

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from salon_booking.application.dto.booking import BookingDTO
from salon_booking.domain.entities.booking import PaymentMethod, PaymentStatus


class _CamelSchema(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BookingRequestSchema(_CamelSchema):
    salon_id: str = Field(min_length=1)
    service_ids: list[str] = Field(min_length=1)
    start_time: datetime
    payment_method: PaymentMethod = PaymentMethod.CARD

    @field_validator("start_time")
    @classmethod
    def _naive_utc(cls, value: datetime) -> datetime:
        # Stored times are naive UTC; offsets are folded in here.
        if value.tzinfo is None:
            return value
        return value.astimezone(timezone.utc).replace(tzinfo=None)


class PaymentCompletionSchema(_CamelSchema):
    transaction_id: str = Field(min_length=1)
    succeeded: bool = True


class PaymentReceiptSchema(_CamelSchema):
    payment_id: str
    transaction_id: str
    payment_status: PaymentStatus
    booking: BookingDTO
    notified: bool
