"""Column mixins shared by the ORM tables."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, func
from sqlalchemy.orm import Mapped, MappedColumn, mapped_column


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _timestamp(**kwargs) -> MappedColumn[datetime]:
    return mapped_column(
        DateTime(timezone=True), default=utc_now, server_default=func.now(), nullable=False, **kwargs
    )


class TimestampMixin:
    """Row creation and last-modification times (UTC)."""

    created_at: Mapped[datetime] = _timestamp()
    updated_at: Mapped[datetime] = _timestamp(onupdate=utc_now)
