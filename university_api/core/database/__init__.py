"""Database configuration and models."""

from university_api.core.database.base import Base, TimestampMixin, UUIDMixin
from university_api.core.database.session import (
    engine,
    async_session_factory,
    get_db,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "UUIDMixin",
    "engine",
    "async_session_factory",
    "get_db",
]
