from roster.models.action import Action, ActionCreate, ActionRead
from roster.models.aggregates import (
    ActionWithAttendance,
    ActionWithFullData,
    AttendanceWithAction,
    AttendanceWithContext,
    AttendanceWithFullContext,
    LocationWithTeams,
    ParticipantWithTeam,
    TeamWithLocation,
    TeamWithRoster,
)
from roster.models.attendance import Attendance, AttendanceCreate, AttendanceRead
from roster.models.enums import Batch, Department, Gender, ProjectType, ShirtSize, Wing
from roster.models.location import Location, LocationCreate, LocationRead
from roster.models.participant import Participant, ParticipantCreate, ParticipantRead
from roster.models.team import Team, TeamCreate, TeamRead

__all__ = [
    "Action",
    "ActionCreate",
    "ActionRead",
    "ActionWithAttendance",
    "ActionWithFullData",
    "Attendance",
    "AttendanceCreate",
    "AttendanceRead",
    "AttendanceWithAction",
    "AttendanceWithContext",
    "AttendanceWithFullContext",
    "Batch",
    "Department",
    "Gender",
    "Location",
    "LocationCreate",
    "LocationRead",
    "LocationWithTeams",
    "Participant",
    "ParticipantCreate",
    "ParticipantRead",
    "ParticipantWithTeam",
    "ProjectType",
    "ShirtSize",
    "Team",
    "TeamCreate",
    "TeamRead",
    "TeamWithLocation",
    "TeamWithRoster",
    "Wing",
]
