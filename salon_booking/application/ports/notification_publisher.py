from abc import ABC, abstractmethod

from salon_booking.application.dto.notifications import BookingNotification, PaymentNotification


class NotificationPublisherPort(ABC):
    @abstractmethod
    def publish_booking(self, notification: BookingNotification) -> None:
        raise NotImplementedError

    @abstractmethod
    def publish_payment(self, notification: PaymentNotification) -> None:
        raise NotImplementedError
