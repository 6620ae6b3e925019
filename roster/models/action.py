"""Action model for sessions that attendance is taken for."""

from typing import TYPE_CHECKING

from sqlmodel import Field, Relationship, SQLModel

from roster.models.base import LedgerRead, LedgerRecord

if TYPE_CHECKING:
    from roster.models.attendance import Attendance


class ActionBase(SQLModel):
    title: str = Field(min_length=1)
    valid: bool = Field(default=True)


class Action(ActionBase, LedgerRecord, table=True):
    """A trackable session, e.g. a meal or a check-in round.

    Invalid actions (``valid == False``) are kept for reporting but left out
    of the default action listing.
    """
    attendance: list["Attendance"] = Relationship(back_populates="action")


class ActionCreate(ActionBase):
    pass


class ActionRead(ActionBase, LedgerRead):
    pass
