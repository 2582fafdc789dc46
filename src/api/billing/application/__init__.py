"""Application layer for billing provisioning."""

from billing.application.handlers import OrganizationCreatedHandler
from billing.application.provisioning import BillingWorkspaceProvisioner

__all__ = ["BillingWorkspaceProvisioner", "OrganizationCreatedHandler"]
