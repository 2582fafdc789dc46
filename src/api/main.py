"""Main FastAPI application entry point.

The application hosts the billing provisioning consumer for the lifetime
of the process. It exposes no API beyond a liveness check.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI

from billing.dependencies import create_provisioning_consumer
from infrastructure.database.dependencies import (
    close_database_connections,
    get_sessionmaker,
)
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultApplicationProbe
from infrastructure.settings import get_outbox_consumer_settings, get_settings
from infrastructure.version import __version__


@asynccontextmanager
async def billing_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Outbox consumer start on startup and stop on shutdown
    - Database engine disposal on shutdown
    """
    settings = get_settings()
    configure_logging(debug=settings.debug)
    probe = DefaultApplicationProbe()
    probe.application_started(settings.app_name, __version__)

    consumer = None
    outbox_settings = get_outbox_consumer_settings()
    try:
        if outbox_settings.enabled:
            consumer = create_provisioning_consumer(
                get_sessionmaker(), outbox_settings
            )
            await consumer.start()
        else:
            probe.outbox_consumer_disabled()

        app.state.outbox_consumer = consumer
        yield
    finally:
        if consumer is not None:
            await consumer.stop()
        await close_database_connections()
        probe.application_stopped()


app = FastAPI(
    title="Billing Provisioner",
    description="Provisions billing workspaces from the organization outbox",
    version=__version__,
    lifespan=billing_lifespan,
)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}
