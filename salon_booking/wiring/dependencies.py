from functools import lru_cache
import logging

from salon_booking.core.config import settings
from salon_booking.application.ports.booking_repository import BookingRepositoryPort
from salon_booking.application.ports.booking_service import BookingServicePort
from salon_booking.application.ports.directories import (
    CustomerDirectoryPort,
    SalonDirectoryPort,
    ServiceCatalogPort,
)
from salon_booking.application.ports.email_sender import EmailSenderPort
from salon_booking.application.ports.notification_publisher import NotificationPublisherPort
from salon_booking.application.use_cases.complete_payment import CompletePaymentUseCase
from salon_booking.application.use_cases.create_booking import CreateBookingUseCase
from salon_booking.application.use_cases.query_bookings import QueryBookingsUseCase
from salon_booking.application.use_cases.salon_report import SalonReportUseCase
from salon_booking.application.use_cases.send_notification_email import SendNotificationEmailUseCase
from salon_booking.application.use_cases.update_booking import UpdateBookingUseCase
from salon_booking.infrastructure.booking_client.http_booking_client import HttpBookingClient
from salon_booking.infrastructure.directories.http_directories import (
    HttpCustomerDirectory,
    HttpSalonDirectory,
    HttpServiceCatalog,
    ServiceLookupClient,
)
from salon_booking.infrastructure.directories.memory_directories import MemoryDirectory, load_directory
from salon_booking.infrastructure.email.mock_sender import MockEmailSender
from salon_booking.infrastructure.email.smtp_sender import SmtpEmailSender
from salon_booking.infrastructure.email.templates import JinjaEmailRenderer
from salon_booking.infrastructure.messaging.memory_queue import MemoryNotificationQueue
from salon_booking.infrastructure.messaging.redis_queue import RedisNotificationPublisher, create_redis_client
from salon_booking.infrastructure.store.json_store import JsonBookingRepository
from salon_booking.infrastructure.store.memory_store import MemoryBookingRepository


logger = logging.getLogger(__name__)

_booking_repository: MemoryBookingRepository | JsonBookingRepository | None = None


def get_booking_repository() -> BookingRepositoryPort:
    global _booking_repository
    if _booking_repository is None:
        if settings.STORE_PROVIDER.lower() == "json":
            _booking_repository = JsonBookingRepository(data_dir=settings.BOOKING_DATA_DIR)
        else:
            _booking_repository = MemoryBookingRepository()
    return _booking_repository


@lru_cache
def get_memory_directory() -> MemoryDirectory:
    return load_directory(settings.DIRECTORY_SEED_FILE)


def _lookup_client(base_url: str | None, resource_path: str, resource_name: str) -> ServiceLookupClient | None:
    if base_url:
        return ServiceLookupClient(
            base_url=base_url,
            resource_path=resource_path,
            resource_name=resource_name,
            timeout=settings.HTTP_TIMEOUT_SECONDS,
        )
    if settings.is_local:
        logger.info("Using MemoryDirectory for %s lookups (no service URL, ENV=dev/local)", resource_name)
        return None
    raise ValueError(f"A base URL for the {resource_name} service is required outside dev/local.")


@lru_cache
def get_customer_directory() -> CustomerDirectoryPort:
    client = _lookup_client(settings.USER_SERVICE_URL, "api/users", "User")
    return HttpCustomerDirectory(client) if client else get_memory_directory()


@lru_cache
def get_salon_directory() -> SalonDirectoryPort:
    client = _lookup_client(settings.SALON_SERVICE_URL, "api/salons", "Salon")
    return HttpSalonDirectory(client) if client else get_memory_directory()


@lru_cache
def get_service_catalog() -> ServiceCatalogPort:
    client = _lookup_client(settings.SERVICE_OFFERING_URL, "api/service-offering", "Service")
    return HttpServiceCatalog(client) if client else get_memory_directory()


@lru_cache
def get_notification_publisher() -> NotificationPublisherPort:
    if settings.REDIS_URL:
        return RedisNotificationPublisher(
            create_redis_client(settings.REDIS_URL),
            booking_queue=settings.BOOKING_QUEUE,
            payment_queue=settings.PAYMENT_QUEUE,
        )
    logger.info("Using MemoryNotificationQueue (REDIS_URL not set)")
    return MemoryNotificationQueue(booking_queue=settings.BOOKING_QUEUE, payment_queue=settings.PAYMENT_QUEUE)


def get_create_booking_use_case() -> CreateBookingUseCase:
    return CreateBookingUseCase(
        repository=get_booking_repository(),
        salons=get_salon_directory(),
        services=get_service_catalog(),
        publisher=get_notification_publisher(),
    )


def get_update_booking_use_case() -> UpdateBookingUseCase:
    return UpdateBookingUseCase(repository=get_booking_repository())


def get_query_bookings_use_case() -> QueryBookingsUseCase:
    return QueryBookingsUseCase(repository=get_booking_repository())


def get_salon_report_use_case() -> SalonReportUseCase:
    return SalonReportUseCase(repository=get_booking_repository(), salons=get_salon_directory())


@lru_cache
def get_booking_service_client() -> BookingServicePort:
    return HttpBookingClient(base_url=settings.BOOKING_SERVICE_URL, timeout=settings.HTTP_TIMEOUT_SECONDS)


def get_complete_payment_use_case() -> CompletePaymentUseCase:
    return CompletePaymentUseCase(bookings=get_booking_service_client(), publisher=get_notification_publisher())


def get_email_sender() -> EmailSenderPort:
    if settings.SMTP_HOST:
        return SmtpEmailSender(
            host=settings.SMTP_HOST,
            port=settings.SMTP_PORT,
            username=settings.SMTP_USERNAME,
            password=settings.SMTP_PASSWORD,
            use_tls=settings.SMTP_USE_TLS,
            from_address=settings.MAIL_FROM,
        )
    if settings.is_local:
        logger.info("Using MockEmailSender (SMTP_HOST missing, ENV=dev/local)")
        return MockEmailSender()
    raise ValueError("SMTP_HOST is required to send notification emails.")


def get_send_notification_email_use_case() -> SendNotificationEmailUseCase:
    return SendNotificationEmailUseCase(
        renderer=JinjaEmailRenderer(),
        sender=get_email_sender(),
        currency_symbol=settings.CURRENCY_SYMBOL,
    )
