"""Attendance model linking a participant to an action.

No unique constraint backs (action_id, participant_id). Whether a second
submission creates a row is decided by ``roster.ledger.attendance``.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from roster.models.base import LedgerRead, LedgerRecord

if TYPE_CHECKING:
    from roster.models.action import Action
    from roster.models.participant import Participant


class AttendanceBase(SQLModel):
    action_id: int = Field(foreign_key="action.id", index=True)
    participant_id: int = Field(foreign_key="participant.id", index=True)


class Attendance(AttendanceBase, LedgerRecord, table=True):
    """Presence of one participant at one action."""

    action: Optional["Action"] = Relationship(back_populates="attendance")
    participant: Optional["Participant"] = Relationship(back_populates="attendance")


class AttendanceCreate(AttendanceBase):
    pass


class AttendanceRead(AttendanceBase, LedgerRead):
    pass
