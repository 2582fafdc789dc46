"""Organization event serializer for outbox persistence.

This module converts OrganizationCreated events to JSON-compatible
dictionaries for the billing_events table and reconstructs them when the
consumer processes an event. Decoding is strict about the organization id
and lenient about everything else.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from billing.domain.events import ORGANIZATION_CREATED, OrganizationCreated
from billing.domain.value_objects import OrganizationId
from billing.ports.exceptions import DecodeError, IdentifierFormatError, ValidationError

_SUPPORTED_EVENTS: frozenset[str] = frozenset({ORGANIZATION_CREATED})

# Context fields carried through as strings
_CONTEXT_FIELDS = (
    "owner_user_id",
    "country_code",
    "timezone_name",
    "default_currency",
    "created_at",
)


class OrganizationCreatedSerializer:
    """Serializes and deserializes organization.created payloads."""

    def supported_event_types(self) -> frozenset[str]:
        """Return the event type names this serializer handles."""
        return _SUPPORTED_EVENTS

    def serialize(self, event: OrganizationCreated) -> dict[str, str]:
        """Convert an event to a JSON-serializable dictionary.

        Args:
            event: The event to serialize

        Returns:
            Dictionary with every field as a string
        """
        data = {"organization_id": event.organization_id.value}
        for field in _CONTEXT_FIELDS:
            data[field] = getattr(event, field)
        return data

    def deserialize(self, payload: bytes | str | Mapping[str, Any]) -> OrganizationCreated:
        """Reconstruct an event from its stored payload.

        Args:
            payload: Raw JSON text or bytes, or a mapping already decoded
                by the database driver

        Returns:
            The reconstructed OrganizationCreated event

        Raises:
            DecodeError: If the payload is not a well-formed JSON object
            ValidationError: If organization_id is missing or empty
            IdentifierFormatError: If organization_id is not a valid ULID
        """
        data = self._decode(payload)

        raw_id = data.get("organization_id")
        if not isinstance(raw_id, str) or not raw_id.strip():
            raise ValidationError("missing organization_id", field="organization_id")

        organization_id = raw_id.strip()
        try:
            parsed_id = OrganizationId.from_string(organization_id)
        except ValueError as e:
            raise IdentifierFormatError(
                f"organization_id is not a valid identifier: {organization_id!r}",
                value=organization_id,
            ) from e

        context = {field: self._as_string(data.get(field)) for field in _CONTEXT_FIELDS}
        return OrganizationCreated(organization_id=parsed_id, **context)

    def _decode(self, payload: bytes | str | Mapping[str, Any]) -> Mapping[str, Any]:
        """Parse the payload into a mapping."""
        if isinstance(payload, Mapping):
            return payload

        try:
            data = json.loads(payload)
        except (TypeError, ValueError) as e:
            # UnicodeDecodeError and JSONDecodeError are both ValueErrors
            raise DecodeError(f"payload is not valid JSON: {e}") from e

        if not isinstance(data, dict):
            raise DecodeError(
                f"payload must be a JSON object, got {type(data).__name__}"
            )
        return data

    @staticmethod
    def _as_string(value: Any) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)
