"""Nested read shapes returned by the aggregation endpoints.

Each shape has a fixed depth. Collections default to ``[]`` and a parent
that has been soft-deleted is rendered as ``None``.
"""

from roster.models.action import ActionRead
from roster.models.attendance import AttendanceRead
from roster.models.location import LocationRead
from roster.models.participant import ParticipantRead
from roster.models.team import TeamRead


class LocationWithTeams(LocationRead):
    teams: list[TeamRead] = []


class TeamWithLocation(TeamRead):
    location: LocationRead | None = None


class TeamWithRoster(TeamWithLocation):
    members: list[ParticipantRead] = []


class ParticipantWithTeam(ParticipantRead):
    team: TeamWithLocation | None = None


class AttendanceWithContext(AttendanceRead):
    participant: ParticipantRead | None = None
    action: ActionRead | None = None


class AttendanceWithAction(AttendanceRead):
    action: ActionRead | None = None


class ActionWithAttendance(ActionRead):
    attendance: list[AttendanceWithAction] = []


class AttendanceWithFullContext(AttendanceWithAction):
    participant: ParticipantWithTeam | None = None


class ActionWithFullData(ActionRead):
    attendance: list[AttendanceWithFullContext] = []
