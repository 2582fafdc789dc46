"""Infrastructure layer for the outbox pattern.

Contains the SQLAlchemy model, producer-side repository, and consumer
for outbox persistence and processing.
"""

from infrastructure.outbox.models import BillingEventModel
from infrastructure.outbox.repository import OutboxRepository
from infrastructure.outbox.worker import OutboxConsumer

__all__ = ["BillingEventModel", "OutboxConsumer", "OutboxRepository"]
