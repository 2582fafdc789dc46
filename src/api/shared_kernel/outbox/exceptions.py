"""Exceptions for the outbox pattern.

Only fetch failures escape a poll. Everything raised while handling a
single event is caught by the consumer and reported per event.
"""


class OutboxError(Exception):
    """Base exception for outbox processing."""

    pass


class FetchError(OutboxError):
    """Raised when pending events cannot be read from the store.

    Aborts the current poll iteration. The next iteration runs normally
    after the poll interval elapses.
    """

    pass
