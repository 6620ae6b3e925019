"""Participant model.

The table carries both ``gender`` and ``batch``. Which one a deployment
collects is chosen by ``PARTICIPANT_SCHEMA``; see
``roster.ledger.validation.ParticipantSchema``.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from roster.models.base import LedgerRead, LedgerRecord
from roster.models.enums import Batch, Department, Gender, ShirtSize

if TYPE_CHECKING:
    from roster.models.attendance import Attendance
    from roster.models.team import Team


class ParticipantBase(SQLModel):
    name: str = Field(min_length=1)
    email: str | None = Field(default=None, index=True)
    phone: str = Field(min_length=1)
    gender: Gender | None = None
    batch: Batch | None = None
    department: Department
    shirt_size: ShirtSize | None = None
    team_id: int = Field(foreign_key="team.id", index=True)


class Participant(ParticipantBase, LedgerRecord, table=True):
    """A member of a team.

    Email is indexed but not unique: the same address may appear on a
    re-registered participant after the original row was soft-deleted.

    Attributes:
        id: Unique identifier.
        team_id: Foreign key to the Team this participant belongs to.
        team: Reference to the Team.
        attendance: Attendance records of this participant.
    """
    team: Optional["Team"] = Relationship(back_populates="members")
    attendance: list["Attendance"] = Relationship(back_populates="participant")


class ParticipantCreate(ParticipantBase):
    pass


class ParticipantRead(ParticipantBase, LedgerRead):
    pass
