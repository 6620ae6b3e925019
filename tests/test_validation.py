"""Tests for participant schema variants and reference checks."""

import pytest
from sqlmodel import Session

from roster.core.config import Settings
from roster.core.errors import ValidationError
from roster.ledger.store import EntityStore
from roster.ledger.validation import (
    ParticipantSchema,
    validate_participant,
    validate_team,
)
from roster.models import Batch, Gender, Location, ParticipantCreate, Team, TeamCreate


def payload(team_id: int, **overrides) -> ParticipantCreate:
    fields = {
        "name": "Meera",
        "email": "meera@example.com",
        "phone": "9000000000",
        "gender": "FEMALE",
        "batch": "SECOND_YEAR",
        "department": "EC",
        "shirt_size": "S",
        "team_id": team_id,
    }
    fields.update(overrides)
    return ParticipantCreate(**fields)


class TestParticipantSchema:
    def test_from_settings(self):
        config = Settings(participant_schema="batch", require_email=False, _env_file=None)

        schema = ParticipantSchema.from_settings(config)

        assert schema.classification == "batch"
        assert schema.require_email is False
        assert schema.counts_gender is False

    def test_gender_schema_clears_batch(self, session: Session, team: Team):
        cleaned = validate_participant(session, payload(team.id), ParticipantSchema())

        assert cleaned.gender == Gender.FEMALE
        assert cleaned.batch is None

    def test_batch_schema_clears_gender(self, session: Session, team: Team):
        cleaned = validate_participant(
            session, payload(team.id), ParticipantSchema(classification="batch")
        )

        assert cleaned.batch == Batch.SECOND_YEAR
        assert cleaned.gender is None

    def test_gender_required_in_gender_schema(self, session: Session, team: Team):
        with pytest.raises(ValidationError, match="gender"):
            validate_participant(session, payload(team.id, gender=None), ParticipantSchema())

    def test_batch_required_in_batch_schema(self, session: Session, team: Team):
        with pytest.raises(ValidationError, match="batch"):
            validate_participant(
                session, payload(team.id, batch=None), ParticipantSchema(classification="batch")
            )

    def test_optional_email_and_shirt_size(self, session: Session, team: Team):
        schema = ParticipantSchema(require_email=False, require_shirt_size=False)

        cleaned = validate_participant(
            session, payload(team.id, email=None, shirt_size=None), schema
        )

        assert cleaned.email is None

    def test_missing_fields_are_listed(self, session: Session, team: Team):
        with pytest.raises(ValidationError) as exc_info:
            validate_participant(
                session, payload(team.id, email=None, shirt_size=None), ParticipantSchema()
            )
        assert "email" in exc_info.value.message
        assert "shirt_size" in exc_info.value.message


class TestReferences:
    def test_unknown_team(self, session: Session):
        with pytest.raises(ValidationError, match="team_id 77"):
            validate_participant(session, payload(77), ParticipantSchema())

    def test_deleted_team(self, session: Session, team: Team):
        EntityStore(session).delete(Team, team.id)
        with pytest.raises(ValidationError):
            validate_participant(session, payload(team.id), ParticipantSchema())

    def test_team_requires_active_location(self, session: Session, location: Location):
        EntityStore(session).delete(Location, location.id)
        with pytest.raises(ValidationError, match="location_id"):
            validate_team(
                session, TeamCreate(name="T", project_type="IOT", location_id=location.id)
            )
