"""Team model and its cached gender counters.

``male_count`` and ``female_count`` are derived values maintained by
``roster.ledger.counters``. They are not writable through the API and can
drift if rows are changed behind the ledger's back; a recount restores them.
"""

from typing import TYPE_CHECKING, Optional

from sqlmodel import Field, Relationship, SQLModel

from roster.models.base import LedgerRead, LedgerRecord
from roster.models.enums import ProjectType

if TYPE_CHECKING:
    from roster.models.location import Location
    from roster.models.participant import Participant


class TeamBase(SQLModel):
    name: str = Field(min_length=1)
    project_type: ProjectType
    location_id: int = Field(foreign_key="location.id", index=True)


class Team(TeamBase, LedgerRecord, table=True):
    """A team competing at the event.

    Attributes:
        id: Unique identifier.
        name: Team name.
        project_type: Kind of project the team is building.
        male_count: Cached number of active male members.
        female_count: Cached number of active female members.
        location_id: Foreign key to the hosting Location.
        location: Reference to the hosting Location.
        members: Participants of this team, including soft-deleted ones.
    """
    male_count: int = Field(default=0)
    female_count: int = Field(default=0)

    location: Optional["Location"] = Relationship(back_populates="teams")
    members: list["Participant"] = Relationship(back_populates="team")


class TeamCreate(TeamBase):
    pass


class TeamRead(TeamBase, LedgerRead):
    male_count: int = 0
    female_count: int = 0
