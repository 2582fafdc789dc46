"""Unit test fixtures with in-memory and mocked dependencies."""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from datetime import UTC, datetime, timedelta
from typing import Any

import pytest
from ulid import ULID

from billing.domain.events import ORGANIZATION_CREATED
from billing.ports.exceptions import MarkPublishedError, ResourceCreationError
from shared_kernel.outbox.value_objects import OutboxEvent


class InMemoryProvisioningTransaction:
    """Transaction that stages writes and applies them only on commit."""

    def __init__(self, store: InMemoryProvisioningStore) -> None:
        self._store = store
        self._staged_workspaces: dict[str, dict[str, Any]] = {}
        self._staged_published: dict[str, datetime] = {}
        self._finished = False
        self.committed = False
        self.rolled_back = False

    async def __aenter__(self) -> InMemoryProvisioningTransaction:
        return self

    async def __aexit__(self, exc_type, exc, tb) -> None:
        if not self._finished:
            await self.rollback()

    async def workspace_exists_for_organization(self, organization_id) -> bool:
        key = organization_id.value
        return key in self._store.workspaces or key in self._staged_workspaces

    async def create_workspace(self, workspace_id, organization_id, now) -> None:
        key = organization_id.value
        if key in self._store.fail_create_for:
            raise ResourceCreationError(f"forced create failure for {key}")
        if key in self._store.workspaces or key in self._staged_workspaces:
            raise ResourceCreationError(
                "duplicate key value violates unique constraint "
                '"uq_billing_workspaces_organization_id"'
            )
        self._staged_workspaces[key] = {
            "id": workspace_id.value,
            "organization_id": key,
            "created_at": now,
        }

    async def mark_published(self, event_id: str, now: datetime) -> None:
        if event_id in self._store.fail_mark_published_for:
            raise MarkPublishedError(f"forced mark-published failure for {event_id}")
        if self._store.before_mark_published is not None:
            await self._store.before_mark_published(event_id)
        row = self._store.events.get(event_id)
        if row is None or row["published"]:
            raise MarkPublishedError(
                f"Event {event_id} does not exist or is already published"
            )
        self._staged_published[event_id] = now

    async def commit(self) -> None:
        for key, workspace in self._staged_workspaces.items():
            if key in self._store.workspaces:
                raise ResourceCreationError("unique constraint violated at commit")
            self._store.workspaces[key] = workspace
        for event_id, now in self._staged_published.items():
            self._store.events[event_id]["published"] = True
            self._store.events[event_id]["published_at"] = now
        self._finished = True
        self.committed = True

    async def rollback(self) -> None:
        self._staged_workspaces.clear()
        self._staged_published.clear()
        self._finished = True
        self.rolled_back = True


class InMemoryProvisioningStore:
    """Store double with the same contract as SqlAlchemyProvisioningStore."""

    def __init__(self) -> None:
        self.events: dict[str, dict[str, Any]] = {}
        self.workspaces: dict[str, dict[str, Any]] = {}
        self.transactions: list[InMemoryProvisioningTransaction] = []
        self.fetch_error: Exception | None = None
        self.fail_create_for: set[str] = set()
        self.fail_mark_published_for: set[str] = set()
        # Awaited inside mark_published, after the workspace has been staged
        self.before_mark_published: Callable[[str], Awaitable[None]] | None = None
        self._clock = datetime(2026, 1, 8, 12, 0, 0, tzinfo=UTC)

    def add_event(
        self,
        payload: Any,
        organization_id: str | None = None,
        event_type: str = ORGANIZATION_CREATED,
        created_at: datetime | None = None,
    ) -> str:
        """Record an unpublished event and return its id.

        Without an explicit created_at, each event is one second newer
        than the previous one.
        """
        if created_at is None:
            self._clock += timedelta(seconds=1)
            created_at = self._clock
        event_id = str(ULID())
        self.events[event_id] = {
            "id": event_id,
            "organization_id": organization_id or "",
            "event_type": event_type,
            "payload": payload,
            "published": False,
            "published_at": None,
            "created_at": created_at,
        }
        return event_id

    def is_published(self, event_id: str) -> bool:
        return self.events[event_id]["published"]

    def workspace_count(self, organization_id: str) -> int:
        return 1 if organization_id in self.workspaces else 0

    async def fetch_pending(self, event_type: str, limit: int) -> list[OutboxEvent]:
        if self.fetch_error is not None:
            raise self.fetch_error
        rows = sorted(
            (
                row
                for row in self.events.values()
                if row["event_type"] == event_type and not row["published"]
            ),
            key=lambda row: (row["created_at"], row["id"]),
        )
        return [OutboxEvent(**row) for row in rows[:limit]]

    def begin(self) -> InMemoryProvisioningTransaction:
        txn = InMemoryProvisioningTransaction(self)
        self.transactions.append(txn)
        return txn


@pytest.fixture
def store() -> InMemoryProvisioningStore:
    """Provide an empty in-memory provisioning store."""
    return InMemoryProvisioningStore()


@pytest.fixture
def fixed_now() -> datetime:
    """Provide a fixed processing instant."""
    return datetime(2026, 1, 8, 12, 30, 0, tzinfo=UTC)


@pytest.fixture
def make_payload():
    """Build an organization.created payload dictionary."""

    def _make(organization_id: str, **overrides: Any) -> dict[str, Any]:
        payload = {
            "organization_id": organization_id,
            "owner_user_id": "01ARZCX0P0HZGQP3MZXQQ0NNWW",
            "country_code": "ID",
            "timezone_name": "Asia/Jakarta",
            "default_currency": "IDR",
            "created_at": "2026-01-08T12:00:00Z",
        }
        payload.update(overrides)
        return payload

    return _make


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import DatabaseSettings

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        username="testuser",
        password="testpass",
    )
