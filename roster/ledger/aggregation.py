"""Nested read shapes for the roster endpoints.

Every shape is built level by level: load the top rows, collect the foreign
keys, load the next level with one ``IN`` query, and so on. Soft-deleted
rows are dropped at every level, so a deleted member never shows up in a
roster and a deleted parent is rendered as ``None``.

Nothing here writes.
"""
from collections import defaultdict
from collections.abc import Iterable

from sqlmodel import Session, col, select

from roster.ledger.store import EntityStore
from roster.models import (
    Action,
    ActionRead,
    ActionWithAttendance,
    ActionWithFullData,
    Attendance,
    AttendanceWithAction,
    AttendanceWithContext,
    AttendanceWithFullContext,
    Location,
    LocationRead,
    LocationWithTeams,
    Participant,
    ParticipantRead,
    ParticipantWithTeam,
    Team,
    TeamRead,
    TeamWithLocation,
    TeamWithRoster,
)
from roster.models.base import LedgerRecord


def _active_by_id(session: Session, model: type[LedgerRecord], ids: Iterable[int]) -> dict:
    """Load active rows of ``model`` keyed by id."""
    wanted = set(ids)
    if not wanted:
        return {}
    statement = (
        select(model)
        .where(col(model.id).in_(wanted))
        .where(col(model.deleted_at).is_(None))
    )
    return {row.id: row for row in session.exec(statement).all()}


def _active_children(
    session: Session, model: type[LedgerRecord], foreign_key: str, parent_ids: Iterable[int]
) -> dict[int, list]:
    """Load active rows of ``model`` grouped by ``foreign_key``, in insertion order."""
    wanted = set(parent_ids)
    grouped: dict[int, list] = defaultdict(list)
    if not wanted:
        return grouped
    fk_column = col(getattr(model, foreign_key))
    statement = (
        select(model)
        .where(fk_column.in_(wanted))
        .where(col(model.deleted_at).is_(None))
        .order_by(col(model.id))
    )
    for row in session.exec(statement).all():
        grouped[getattr(row, foreign_key)].append(row)
    return grouped


def _read(shape, record, **nested):
    """Copy a table row into a read shape, attaching the nested levels."""
    if record is None:
        return None
    return shape(**record.model_dump(), **nested)


# Locations


def _compose_locations(session: Session, locations: list[Location]) -> list[LocationWithTeams]:
    teams = _active_children(session, Team, "location_id", (loc.id for loc in locations))
    return [
        _read(
            LocationWithTeams,
            location,
            teams=[_read(TeamRead, team) for team in teams[location.id]],
        )
        for location in locations
    ]


def locations_with_teams(session: Session) -> list[LocationWithTeams]:
    return _compose_locations(session, EntityStore(session).list_active(Location))


def location_with_teams(session: Session, location_id: int) -> LocationWithTeams:
    location = EntityStore(session).get(Location, location_id)
    return _compose_locations(session, [location])[0]


# Teams


def _compose_teams(session: Session, teams: list[Team]) -> list[TeamWithRoster]:
    locations = _active_by_id(session, Location, (team.location_id for team in teams))
    members = _active_children(session, Participant, "team_id", (team.id for team in teams))
    return [
        _read(
            TeamWithRoster,
            team,
            location=_read(LocationRead, locations.get(team.location_id)),
            members=[_read(ParticipantRead, p) for p in members[team.id]],
        )
        for team in teams
    ]


def teams_with_roster(session: Session) -> list[TeamWithRoster]:
    return _compose_teams(session, EntityStore(session).list_active(Team))


def team_with_roster(session: Session, team_id: int) -> TeamWithRoster:
    team = EntityStore(session).get(Team, team_id)
    return _compose_teams(session, [team])[0]


# Participants


def _teams_with_location(session: Session, team_ids: Iterable[int]) -> dict[int, TeamWithLocation]:
    teams = _active_by_id(session, Team, team_ids)
    locations = _active_by_id(session, Location, (team.location_id for team in teams.values()))
    return {
        team_id: _read(
            TeamWithLocation,
            team,
            location=_read(LocationRead, locations.get(team.location_id)),
        )
        for team_id, team in teams.items()
    }


def _participants_with_team(
    session: Session, participants: Iterable[Participant]
) -> dict[int, ParticipantWithTeam]:
    participants = list(participants)
    teams = _teams_with_location(session, (p.team_id for p in participants))
    return {
        p.id: _read(ParticipantWithTeam, p, team=teams.get(p.team_id))
        for p in participants
    }


def participants_with_team(session: Session) -> list[ParticipantWithTeam]:
    participants = EntityStore(session).list_active(Participant)
    return list(_participants_with_team(session, participants).values())


def participant_with_team(session: Session, participant_id: int) -> ParticipantWithTeam:
    participant = EntityStore(session).get(Participant, participant_id)
    return _participants_with_team(session, [participant])[participant.id]


# Attendance


def _compose_attendance(session: Session, records: list[Attendance]) -> list[AttendanceWithContext]:
    participants = _active_by_id(session, Participant, (a.participant_id for a in records))
    actions = _active_by_id(session, Action, (a.action_id for a in records))
    return [
        _read(
            AttendanceWithContext,
            attendance,
            participant=_read(ParticipantRead, participants.get(attendance.participant_id)),
            action=_read(ActionRead, actions.get(attendance.action_id)),
        )
        for attendance in records
    ]


def attendance_with_context(session: Session) -> list[AttendanceWithContext]:
    return _compose_attendance(session, EntityStore(session).list_active(Attendance))


def attendance_record_with_context(session: Session, attendance_id: int) -> AttendanceWithContext:
    attendance = EntityStore(session).get(Attendance, attendance_id)
    return _compose_attendance(session, [attendance])[0]


# Actions


def actions_valid_only(session: Session) -> list[ActionWithAttendance]:
    """Valid actions with their attendance, each attendance carrying its action."""
    actions = EntityStore(session).list_active(Action, Action.valid == True)  # noqa: E712
    attendance = _active_children(session, Attendance, "action_id", (a.id for a in actions))
    result = []
    for action in actions:
        action_read = _read(ActionRead, action)
        result.append(
            _read(
                ActionWithAttendance,
                action,
                attendance=[
                    _read(AttendanceWithAction, record, action=action_read)
                    for record in attendance[action.id]
                ],
            )
        )
    return result


def _compose_full(session: Session, actions: list[Action]) -> list[ActionWithFullData]:
    attendance = _active_children(session, Attendance, "action_id", (a.id for a in actions))
    participant_ids = (
        record.participant_id for records in attendance.values() for record in records
    )
    participants = _participants_with_team(
        session, _active_by_id(session, Participant, participant_ids).values()
    )
    result = []
    for action in actions:
        action_read = _read(ActionRead, action)
        result.append(
            _read(
                ActionWithFullData,
                action,
                attendance=[
                    _read(
                        AttendanceWithFullContext,
                        record,
                        action=action_read,
                        participant=participants.get(record.participant_id),
                    )
                    for record in attendance[action.id]
                ],
            )
        )
    return result


def actions_with_full_data(session: Session) -> list[ActionWithFullData]:
    """Every action, valid or not, down to attendance → participant → team → location."""
    return _compose_full(session, EntityStore(session).list_active(Action))


def action_with_full_data(session: Session, action_id: int) -> ActionWithFullData:
    action = EntityStore(session).get(Action, action_id)
    return _compose_full(session, [action])[0]
