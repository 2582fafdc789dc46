"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import Protocol

import structlog


class EngineProbe(Protocol):
    """Domain probe for database engine lifecycle."""

    def engine_created(self, connection_string: str) -> None:
        """Record that the shared engine was created."""
        ...

    def engine_disposed(self) -> None:
        """Record that the shared engine and its pool were disposed."""
        ...


class DefaultEngineProbe:
    """Default implementation of EngineProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger().bind(component="database")

    def engine_created(self, connection_string: str) -> None:
        # connection_string never contains the password
        self._logger.info("database_engine_created", database=connection_string)

    def engine_disposed(self) -> None:
        self._logger.info("database_engine_disposed")


class ApplicationProbe(Protocol):
    """Domain probe for process lifecycle."""

    def application_started(self, app_name: str, version: str) -> None:
        ...

    def outbox_consumer_disabled(self) -> None:
        ...

    def application_stopped(self) -> None:
        ...


class DefaultApplicationProbe:
    """Default implementation of ApplicationProbe using structlog."""

    def __init__(self, logger: structlog.stdlib.BoundLogger | None = None):
        self._logger = logger or structlog.get_logger().bind(component="application")

    def application_started(self, app_name: str, version: str) -> None:
        self._logger.info("application_started", app_name=app_name, version=version)

    def outbox_consumer_disabled(self) -> None:
        self._logger.warning("outbox_consumer_disabled")

    def application_stopped(self) -> None:
        self._logger.info("application_stopped")
