"""Database infrastructure - shared engine and ORM primitives."""

from infrastructure.database.dependencies import (
    close_database_connections,
    get_engine,
    get_sessionmaker,
)
from infrastructure.database.models import Base

__all__ = [
    "Base",
    "close_database_connections",
    "get_engine",
    "get_sessionmaker",
]
