from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class _QueueMessage(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class BookingNotification(_QueueMessage):
    booking_id: str
    customer_email: str
    customer_name: str
    salon_name: str
    service_name: str
    start_time: str
    total_price: int = Field(ge=0)


class PaymentNotification(_QueueMessage):
    payment_id: str
    booking_id: str
    customer_email: str
    customer_name: str
    amount: int = Field(ge=0)
    transaction_id: str
