"""Participant routes.

Creating a participant also bumps its team's gender counter when the
deployment uses the gender schema.
"""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from roster.core.database import get_session
from roster.ledger import aggregation
from roster.ledger.counters import increment_for_participant, recount_team
from roster.ledger.store import EntityStore
from roster.ledger.validation import (
    ParticipantSchema,
    get_participant_schema,
    validate_participant,
)
from roster.models import Participant, ParticipantCreate, ParticipantRead, ParticipantWithTeam

router = APIRouter(prefix="/participants", tags=["participants"])


@router.get("", response_model=list[ParticipantWithTeam])
async def list_participants(session: Session = Depends(get_session)):
    """List active participants with their team and the team's location."""
    return aggregation.participants_with_team(session)


@router.get("/{participant_id}", response_model=ParticipantWithTeam)
async def get_participant(participant_id: int, session: Session = Depends(get_session)):
    """Get one participant with team and location."""
    return aggregation.participant_with_team(session, participant_id)


@router.post("", response_model=ParticipantRead)
async def create_participant(
    data: ParticipantCreate,
    session: Session = Depends(get_session),
    schema: ParticipantSchema = Depends(get_participant_schema),
):
    """
    Register a participant.

    The team must be active and the payload must carry the fields required
    by the deployment's participant schema. In the gender schema the team's
    male_count or female_count is incremented once the row is stored.
    """
    cleaned = validate_participant(session, data, schema)
    participant = EntityStore(session).create(Participant.model_validate(cleaned))
    if schema.counts_gender:
        increment_for_participant(session, participant)
        session.refresh(participant)
    return participant


@router.put("/{participant_id}", response_model=ParticipantRead)
async def update_participant(
    participant_id: int,
    data: ParticipantCreate,
    session: Session = Depends(get_session),
    schema: ParticipantSchema = Depends(get_participant_schema),
):
    """
    Replace every field of an active participant.

    When gender or team changes, both the previous and the new team are
    recounted from their members.
    """
    store = EntityStore(session)
    previous_team_id = store.get(Participant, participant_id).team_id
    cleaned = validate_participant(session, data, schema)
    participant = store.update(Participant, participant_id, cleaned)
    if schema.counts_gender:
        for team_id in {previous_team_id, participant.team_id}:
            recount_team(session, team_id)
        session.refresh(participant)
    return participant


@router.delete("/{participant_id}", response_model=ParticipantRead | None)
async def delete_participant(
    participant_id: int,
    session: Session = Depends(get_session),
    schema: ParticipantSchema = Depends(get_participant_schema),
):
    """
    Soft-delete a participant.

    The team's counters are recounted so the deleted member no longer
    counts. Deleting twice, or deleting an unknown id, is not an error.
    """
    participant = EntityStore(session).delete(Participant, participant_id)
    if participant is not None and schema.counts_gender:
        recount_team(session, participant.team_id)
        session.refresh(participant)
    return participant
