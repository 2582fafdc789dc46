"""Billing domain layer."""

from billing.domain.events import ORGANIZATION_CREATED, OrganizationCreated
from billing.domain.value_objects import BillingWorkspaceId, OrganizationId

__all__ = [
    "ORGANIZATION_CREATED",
    "BillingWorkspaceId",
    "OrganizationCreated",
    "OrganizationId",
]
