"""Exceptions for the billing provisioning bounded context.

Every exception here concerns a single outbox event. The consumer catches
them per event, logs them, and leaves the event unpublished so the next
poll retries it.
"""


class ProvisioningError(Exception):
    """Base exception for billing workspace provisioning."""

    pass


class PayloadError(ProvisioningError):
    """Base exception for malformed event payloads."""

    pass


class DecodeError(PayloadError):
    """Raised when a payload is not a well-formed JSON object."""

    pass


class ValidationError(PayloadError):
    """Raised when a required payload field is missing or empty."""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class IdentifierFormatError(PayloadError):
    """Raised when an identifier in the payload is not a valid ULID."""

    def __init__(self, message: str, value: str | None = None):
        super().__init__(message)
        self.value = value


class ResourceCreationError(ProvisioningError):
    """Raised when the billing workspace cannot be checked or created.

    This includes losing a race against another consumer on the unique
    organization_id constraint. The transaction is rolled back and the
    event is retried.
    """

    pass


class MarkPublishedError(ProvisioningError):
    """Raised when the source event cannot be marked published.

    The transaction is rolled back, undoing any workspace created in it.
    """

    pass
