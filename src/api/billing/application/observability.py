"""Domain probes for billing provisioning.

Following Domain Oriented Observability, the provisioner reports what
happened to the workspace in domain terms and leaves logging to the probe.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class ProvisioningProbe(Protocol):
    """Domain probe for billing workspace provisioning."""

    def workspace_created(
        self, event_id: str, organization_id: str, workspace_id: str
    ) -> None:
        """Record that a new billing workspace was created."""
        ...

    def workspace_already_exists(self, event_id: str, organization_id: str) -> None:
        """Record a redelivered event whose workspace already exists."""
        ...

    def provisioning_rolled_back(
        self, event_id: str, organization_id: str, error: Exception
    ) -> None:
        """Record that the unit of work was rolled back."""
        ...


class DefaultProvisioningProbe:
    """Default implementation of ProvisioningProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger().bind(
            component="billing_provisioning"
        )

    def workspace_created(
        self, event_id: str, organization_id: str, workspace_id: str
    ) -> None:
        self._logger.info(
            "billing_workspace_created",
            event_id=event_id,
            organization_id=organization_id,
            workspace_id=workspace_id,
        )

    def workspace_already_exists(self, event_id: str, organization_id: str) -> None:
        self._logger.info(
            "billing_workspace_already_exists",
            event_id=event_id,
            organization_id=organization_id,
        )

    def provisioning_rolled_back(
        self, event_id: str, organization_id: str, error: Exception
    ) -> None:
        self._logger.warning(
            "billing_provisioning_rolled_back",
            event_id=event_id,
            organization_id=organization_id,
            error=str(error),
            error_type=type(error).__name__,
        )
