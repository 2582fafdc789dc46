"""Ports (interfaces) for the billing bounded context.

Ports define the contracts for the event store without specifying
implementation details. This keeps the provisioning logic independent of
the storage technology.
"""

from billing.ports.exceptions import (
    DecodeError,
    IdentifierFormatError,
    MarkPublishedError,
    PayloadError,
    ProvisioningError,
    ResourceCreationError,
    ValidationError,
)
from billing.ports.repositories import IProvisioningStore, IProvisioningTransaction

__all__ = [
    "DecodeError",
    "IProvisioningStore",
    "IProvisioningTransaction",
    "IdentifierFormatError",
    "MarkPublishedError",
    "PayloadError",
    "ProvisioningError",
    "ResourceCreationError",
    "ValidationError",
]
