"""Location model for the rooms that host teams.

A Location groups teams physically. Its ``capacity`` is expressed in teams
and is advisory only: nothing in the ledger refuses a team because the
location is full.
"""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from roster.models.base import LedgerRead, LedgerRecord
from roster.models.enums import Wing

if TYPE_CHECKING:
    from roster.models.team import Team


class LocationBase(SQLModel):
    name: str = Field(min_length=1)
    wing: Wing
    capacity: int = Field(ge=0)  # in terms of teams


class Location(LocationBase, LedgerRecord, table=True):
    """A place that hosts teams.

    Attributes:
        id: Unique identifier.
        name: Display name of the room or lab.
        wing: Building wing the location belongs to.
        capacity: Maximum number of teams it is meant to host.
        teams: Teams assigned to this location, including soft-deleted ones.
    """
    teams: list["Team"] = Relationship(back_populates="location")


class LocationCreate(LocationBase):
    pass


class LocationRead(LocationBase, LedgerRead):
    pass
