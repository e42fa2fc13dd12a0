class BookingNotFoundError(LookupError):
    """Raised when a booking id does not resolve to a stored booking."""
    pass


class BookingValidationError(ValueError):
    """Raised when a booking request is malformed or cannot be fulfilled."""
    pass


class ReferenceNotFoundError(BookingValidationError):
    """Raised when a sibling service reports a referenced user, salon or service as absent."""
    pass


class UpstreamLookupError(RuntimeError):
    """Raised when a sibling service fails (timeouts, network errors, bad responses)."""
    pass


class NotificationPublishError(RuntimeError):
    """Raised when a notification cannot be handed to the message queue."""
    pass
