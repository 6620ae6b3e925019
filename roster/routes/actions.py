"""Action routes."""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from roster.core.database import get_session
from roster.ledger import aggregation
from roster.ledger.store import EntityStore
from roster.models import (
    Action,
    ActionCreate,
    ActionRead,
    ActionWithAttendance,
    ActionWithFullData,
)

router = APIRouter(prefix="/actions", tags=["actions"])


@router.get("", response_model=list[ActionWithAttendance])
async def list_valid_actions(session: Session = Depends(get_session)):
    """
    List valid actions.

    Each action carries its attendance records, and each record carries its
    action again. Actions with valid == false are left out.
    """
    return aggregation.actions_valid_only(session)


@router.get("/full", response_model=list[ActionWithFullData])
async def list_actions_full(session: Session = Depends(get_session)):
    """
    List every action for reporting.

    Valid and invalid actions alike, each with attendance → participant →
    team → location.
    """
    return aggregation.actions_with_full_data(session)


@router.get("/{action_id}", response_model=ActionWithFullData)
async def get_action(action_id: int, session: Session = Depends(get_session)):
    """Get one action with fully materialized attendance."""
    return aggregation.action_with_full_data(session, action_id)


@router.post("", response_model=ActionRead)
async def create_action(data: ActionCreate, session: Session = Depends(get_session)):
    """Create an action. ``valid`` defaults to true."""
    return EntityStore(session).create(Action.model_validate(data))


@router.put("/{action_id}", response_model=ActionRead)
async def update_action(
    action_id: int, data: ActionCreate, session: Session = Depends(get_session)
):
    """Replace title and valid flag of an active action."""
    return EntityStore(session).update(Action, action_id, data)


@router.delete("/{action_id}", response_model=ActionRead | None)
async def delete_action(action_id: int, session: Session = Depends(get_session)):
    """Soft-delete an action. Its attendance records stay in place."""
    return EntityStore(session).delete(Action, action_id)
