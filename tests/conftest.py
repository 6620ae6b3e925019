"""Shared test fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel, create_engine
from sqlmodel.pool import StaticPool

from roster.core.database import get_session
from roster.ledger.validation import ParticipantSchema, get_participant_schema
from roster.main import app
from roster.models import (
    Action,
    Department,
    Gender,
    Location,
    Participant,
    ProjectType,
    ShirtSize,
    Team,
    Wing,
)


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite database for testing."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    SQLModel.metadata.drop_all(engine)


@pytest.fixture(name="session")
def session_fixture(engine):
    """Create a new database session for each test."""
    with Session(engine) as session:
        yield session


@pytest.fixture(name="participant_schema")
def participant_schema_fixture() -> ParticipantSchema:
    """Gender schema with every optional field required, as in production."""
    return ParticipantSchema()


@pytest.fixture(name="client")
def client_fixture(session: Session, participant_schema: ParticipantSchema):
    """Create a test client with the test database session."""

    def get_session_override():
        return session

    app.dependency_overrides[get_session] = get_session_override
    app.dependency_overrides[get_participant_schema] = lambda: participant_schema
    client = TestClient(app)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="location")
def location_fixture(session: Session) -> Location:
    location = Location(name="Lab 3", wing=Wing.IT, capacity=4)
    session.add(location)
    session.commit()
    session.refresh(location)
    return location


@pytest.fixture(name="team")
def team_fixture(session: Session, location: Location) -> Team:
    team = Team(name="Byte Me", project_type=ProjectType.SOFTWARE, location_id=location.id)
    session.add(team)
    session.commit()
    session.refresh(team)
    return team


@pytest.fixture(name="make_participant")
def make_participant_fixture(session: Session, team: Team):
    """Factory inserting participants directly, bypassing the counters."""

    def make(name: str = "Asha", gender: Gender = Gender.FEMALE, team_id: int | None = None):
        participant = Participant(
            name=name,
            email=f"{name.lower()}@example.com",
            phone="9876543210",
            gender=gender,
            department=Department.IT,
            shirt_size=ShirtSize.M,
            team_id=team_id if team_id is not None else team.id,
        )
        session.add(participant)
        session.commit()
        session.refresh(participant)
        return participant

    return make


@pytest.fixture(name="participant")
def participant_fixture(make_participant) -> Participant:
    return make_participant()


@pytest.fixture(name="action")
def action_fixture(session: Session) -> Action:
    action = Action(title="Breakfast")
    session.add(action)
    session.commit()
    session.refresh(action)
    return action


@pytest.fixture(name="invalid_action")
def invalid_action_fixture(session: Session) -> Action:
    action = Action(title="Cancelled Workshop", valid=False)
    session.add(action)
    session.commit()
    session.refresh(action)
    return action


@pytest.fixture(name="participant_payload")
def participant_payload_fixture(team: Team) -> dict:
    return {
        "name": "Ravi",
        "email": "ravi@example.com",
        "phone": "9123456780",
        "gender": "MALE",
        "department": "CE",
        "shirt_size": "L",
        "team_id": team.id,
    }
