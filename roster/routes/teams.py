"""Team routes."""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from roster.core.database import get_session
from roster.core.errors import NotFound
from roster.ledger import aggregation
from roster.ledger.counters import recount_team
from roster.ledger.store import EntityStore
from roster.ledger.validation import validate_team
from roster.models import Team, TeamCreate, TeamRead, TeamWithRoster

router = APIRouter(prefix="/teams", tags=["teams"])


@router.get("", response_model=list[TeamWithRoster])
async def list_teams(session: Session = Depends(get_session)):
    """List active teams with their location and active members."""
    return aggregation.teams_with_roster(session)


@router.get("/{team_id}", response_model=TeamWithRoster)
async def get_team(team_id: int, session: Session = Depends(get_session)):
    """Get one team with its location and active members."""
    return aggregation.team_with_roster(session, team_id)


@router.post("", response_model=TeamRead)
async def create_team(data: TeamCreate, session: Session = Depends(get_session)):
    """
    Create a team.

    The location must be active. Counters start at zero and cannot be set
    by the client.
    """
    validate_team(session, data)
    return EntityStore(session).create(Team.model_validate(data))


@router.put("/{team_id}", response_model=TeamRead)
async def update_team(team_id: int, data: TeamCreate, session: Session = Depends(get_session)):
    """Replace name, project type and location of an active team."""
    validate_team(session, data)
    return EntityStore(session).update(Team, team_id, data)


@router.delete("/{team_id}", response_model=TeamRead | None)
async def delete_team(team_id: int, session: Session = Depends(get_session)):
    """
    Soft-delete a team.

    Members are not deleted with it. Deleting twice, or deleting an unknown
    id, is not an error.
    """
    return EntityStore(session).delete(Team, team_id)


@router.post("/{team_id}/recount", response_model=TeamRead)
async def recount_team_counters(team_id: int, session: Session = Depends(get_session)):
    """Recompute male_count and female_count from the team's active members."""
    team = recount_team(session, team_id)
    if team is None:
        raise NotFound("Team", team_id)
    return team
