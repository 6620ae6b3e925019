"""Write-side checks that run before anything reaches the store.

Request models already reject unknown enum values and missing fields. The
checks here cover what depends on configuration or on stored rows: the
participant field set of the current deployment, and foreign keys that must
point at active records.
"""
from dataclasses import dataclass
from typing import Literal

from sqlmodel import Session

from roster.core.config import settings
from roster.core.errors import ValidationError
from roster.ledger.store import EntityStore
from roster.models import (
    Action,
    AttendanceCreate,
    Location,
    Participant,
    ParticipantCreate,
    Team,
    TeamCreate,
)
from roster.models.base import LedgerRecord


@dataclass(frozen=True)
class ParticipantSchema:
    """Participant field set selected for a deployment.

    Attributes:
        classification: "gender" collects gender and keeps team counters,
            "batch" collects the year batch and keeps no counters.
        require_email: Whether email must be supplied.
        require_shirt_size: Whether shirt_size must be supplied.
    """

    classification: Literal["gender", "batch"] = "gender"
    require_email: bool = True
    require_shirt_size: bool = True

    @property
    def counts_gender(self) -> bool:
        return self.classification == "gender"

    @classmethod
    def from_settings(cls, config=settings) -> "ParticipantSchema":
        return cls(
            classification=config.participant_schema,
            require_email=config.require_email,
            require_shirt_size=config.require_shirt_size,
        )


def get_participant_schema() -> ParticipantSchema:
    """Dependency returning the configured participant schema."""
    return ParticipantSchema.from_settings()


def require_active(
    session: Session, model: type[LedgerRecord], record_id: int, field: str
) -> None:
    """Raise ValidationError unless ``record_id`` names an active ``model`` row."""
    if not EntityStore(session).exists(model, record_id):
        raise ValidationError(
            f"{field} {record_id} does not reference an active {model.__name__}"
        )


def validate_team(session: Session, data: TeamCreate) -> TeamCreate:
    require_active(session, Location, data.location_id, "location_id")
    return data


def validate_participant(
    session: Session, data: ParticipantCreate, schema: ParticipantSchema
) -> ParticipantCreate:
    """Apply the deployment's field set and check the team reference.

    The classification field that the schema does not collect is cleared,
    so a batch deployment never stores a gender and vice versa.
    """
    missing = []
    if schema.counts_gender:
        if data.gender is None:
            missing.append("gender")
        cleaned = data.model_copy(update={"batch": None})
    else:
        if data.batch is None:
            missing.append("batch")
        cleaned = data.model_copy(update={"gender": None})
    if schema.require_email and not data.email:
        missing.append("email")
    if schema.require_shirt_size and data.shirt_size is None:
        missing.append("shirt_size")
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    require_active(session, Team, data.team_id, "team_id")
    return cleaned


def validate_attendance(session: Session, data: AttendanceCreate) -> AttendanceCreate:
    require_active(session, Action, data.action_id, "action_id")
    require_active(session, Participant, data.participant_id, "participant_id")
    return data
