"""
Base Model
==========

Provides common functionality for all database models.
"""

import json
import logging
from datetime import datetime, UTC
from typing import Any, List

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

logger = logging.getLogger(__name__)


def utcnow() -> datetime:
    """Timezone-aware current time, used for column defaults."""
    return datetime.now(UTC)


def as_utc(value: datetime) -> datetime:
    """
    Attach UTC to a naive timestamp.

    SQLite hands DateTime(timezone=True) columns back without tzinfo;
    everything this package writes is UTC.
    """
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


class Base(DeclarativeBase):
    """Base class for all SQLAlchemy models."""
    pass


class TimestampMixin:
    """Mixin that adds created_at and updated_at timestamps."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )


class BaseModel(TimestampMixin):
    """Base model for timestamped tables."""
    pass


def load_json_list(raw: str) -> List[Any]:
    """Deserialize a JSON array column, tolerating empty or broken values."""
    if raw is None:
        return []
    try:
        value = json.loads(raw)
    except (json.JSONDecodeError, TypeError):
        logger.warning("Ignoring unreadable JSON list column value %r", raw)
        return []
    if not isinstance(value, list):
        logger.warning("Ignoring non-list JSON column value %r", raw)
        return []
    return value
