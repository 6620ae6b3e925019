"""Tests for the attendance recording policy."""

import pytest
from sqlmodel import Session, select

from roster.core.errors import ValidationError
from roster.ledger.attendance import find_attendance, parse_allow_duplicates, record_attendance
from roster.ledger.store import EntityStore
from roster.models import Action, Attendance, AttendanceCreate, Participant


def attendance_rows(session: Session) -> list[Attendance]:
    return session.exec(select(Attendance)).all()


class TestParseAllowDuplicates:
    @pytest.mark.parametrize("value", ["true", "TRUE", " True "])
    def test_true_values(self, value):
        assert parse_allow_duplicates(value) is True

    @pytest.mark.parametrize("value", [None, "", "false", "yes", "1"])
    def test_everything_else_is_false(self, value):
        assert parse_allow_duplicates(value) is False


class TestRejectDuplicates:
    def test_first_submission_creates(self, session: Session, action: Action, participant: Participant):
        data = AttendanceCreate(action_id=action.id, participant_id=participant.id)

        attendance, created = record_attendance(session, data)

        assert created is True
        assert attendance.id is not None

    def test_second_submission_returns_existing(
        self, session: Session, action: Action, participant: Participant
    ):
        data = AttendanceCreate(action_id=action.id, participant_id=participant.id)

        first, _ = record_attendance(session, data)
        second, created = record_attendance(session, data)

        assert created is False
        assert second.id == first.id
        assert len(attendance_rows(session)) == 1

    def test_deleted_attendance_does_not_block(
        self, session: Session, action: Action, participant: Participant
    ):
        data = AttendanceCreate(action_id=action.id, participant_id=participant.id)
        first, _ = record_attendance(session, data)
        EntityStore(session).delete(Attendance, first.id)

        second, created = record_attendance(session, data)

        assert created is True
        assert second.id != first.id

    def test_other_action_is_not_a_duplicate(
        self, session: Session, action: Action, invalid_action: Action, participant: Participant
    ):
        record_attendance(session, AttendanceCreate(action_id=action.id, participant_id=participant.id))
        _, created = record_attendance(
            session, AttendanceCreate(action_id=invalid_action.id, participant_id=participant.id)
        )
        assert created is True


class TestAllowDuplicates:
    def test_two_rows_exist(self, session: Session, action: Action, participant: Participant):
        data = AttendanceCreate(action_id=action.id, participant_id=participant.id)

        record_attendance(session, data, allow_duplicates=True)
        _, created = record_attendance(session, data, allow_duplicates=True)

        assert created is True
        assert len(attendance_rows(session)) == 2
        assert find_attendance(session, action.id, participant.id).id == attendance_rows(session)[0].id


class TestReferences:
    def test_unknown_participant_is_rejected(self, session: Session, action: Action):
        with pytest.raises(ValidationError):
            record_attendance(session, AttendanceCreate(action_id=action.id, participant_id=404))
        assert attendance_rows(session) == []

    def test_deleted_action_is_rejected(self, session: Session, action: Action, participant: Participant):
        EntityStore(session).delete(Action, action.id)
        with pytest.raises(ValidationError):
            record_attendance(
                session,
                AttendanceCreate(action_id=action.id, participant_id=participant.id),
                allow_duplicates=True,
            )
