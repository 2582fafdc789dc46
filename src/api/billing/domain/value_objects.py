"""Value objects for the billing domain.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers.
"""

from __future__ import annotations

from dataclasses import dataclass

from ulid import ULID


@dataclass(frozen=True)
class OrganizationId:
    """Identifier of an organization, the subject of provisioning events.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> OrganizationId:
        """Generate a new OrganizationId using ULID."""
        return cls(value=str(ULID()))

    @classmethod
    def from_string(cls, value: str) -> OrganizationId:
        """Create OrganizationId from string value.

        Args:
            value: ULID string

        Returns:
            OrganizationId instance

        Raises:
            ValueError: If value is not a valid ULID
        """
        try:
            ULID.from_str(value)
        except ValueError as e:
            raise ValueError(f"Invalid OrganizationId: {value}") from e

        return cls(value=value)


@dataclass(frozen=True)
class BillingWorkspaceId:
    """Identifier for a BillingWorkspace.

    Uses ULID for sortability and distribution-friendly generation.
    """

    value: str

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def generate(cls) -> BillingWorkspaceId:
        """Generate a new BillingWorkspaceId using ULID."""
        return cls(value=str(ULID()))
