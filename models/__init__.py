"""Database initialization and model exports."""

from datetime import UTC, datetime

from flask_sqlalchemy import SQLAlchemy


db = SQLAlchemy()


def utcnow() -> datetime:
    """Naive UTC timestamp used for created/updated columns."""

    return datetime.now(UTC).replace(tzinfo=None)


# Import models to register them with SQLAlchemy metadata.
from .user import User  # noqa: E402,F401
from .task import Task  # noqa: E402,F401

__all__ = [
    "db",
    "utcnow",
    "User",
    "Task",
]
