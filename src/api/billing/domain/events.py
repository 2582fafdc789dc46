"""Organization domain events consumed by billing.

Events are produced by the organization write path and recorded in the
billing_events outbox under a type tag.
"""

from __future__ import annotations

from dataclasses import dataclass

from billing.domain.value_objects import OrganizationId

ORGANIZATION_CREATED = "organization.created"


@dataclass(frozen=True)
class OrganizationCreated:
    """Event raised when a new organization is created.

    Only organization_id drives provisioning. The remaining fields are
    context carried along for the billing workspace and are not validated.

    Attributes:
        organization_id: The organization to provision a workspace for
        owner_user_id: The user who created the organization
        country_code: ISO country code of the organization
        timezone_name: IANA timezone name
        default_currency: ISO currency code
        created_at: When the organization was created (ISO 8601)
    """

    organization_id: OrganizationId
    owner_user_id: str = ""
    country_code: str = ""
    timezone_name: str = ""
    default_currency: str = ""
    created_at: str = ""
