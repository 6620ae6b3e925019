"""Columns shared by every roster table.

Rows are never physically removed. A delete stamps ``deleted_at`` and every
default read filters on ``deleted_at IS NULL``.
"""

from datetime import UTC, datetime

from sqlmodel import Field, SQLModel


def utcnow() -> datetime:
    return datetime.now(UTC)


class LedgerRecord(SQLModel):
    """Surrogate id, timestamps and the soft-delete marker."""

    id: int | None = Field(default=None, primary_key=True)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: datetime | None = Field(default=None, index=True)

    @property
    def is_active(self) -> bool:
        return self.deleted_at is None


class LedgerRead(SQLModel):
    """Fields every read shape exposes alongside the entity's own fields."""

    id: int
    created_at: datetime
    updated_at: datetime
    deleted_at: datetime | None = None
