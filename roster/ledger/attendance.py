"""Attendance recording policy.

Two mutually exclusive policies, chosen per request by ``allow_duplicates``:

- allowed: always insert a new row for the (action, participant) pair.
- rejected (default): find an active row with the same action_id and
  participant_id and return it untouched; insert only when none exists.

The lookup and the insert are separate statements with no unique
constraint behind them, so two simultaneous first submissions can still
both insert.
"""
import logging

from sqlmodel import Session, col, select

from roster.ledger.store import EntityStore
from roster.ledger.validation import validate_attendance
from roster.models import Attendance, AttendanceCreate

logger = logging.getLogger(__name__)


def parse_allow_duplicates(value: str | None) -> bool:
    """Only the string "true" (any case) enables duplicates."""
    return value is not None and value.strip().lower() == "true"


def find_attendance(session: Session, action_id: int, participant_id: int) -> Attendance | None:
    """Return the oldest active attendance for the pair, if any."""
    statement = (
        select(Attendance)
        .where(col(Attendance.action_id) == action_id)
        .where(col(Attendance.participant_id) == participant_id)
        .where(col(Attendance.deleted_at).is_(None))
        .order_by(col(Attendance.id))
    )
    return session.exec(statement).first()


def record_attendance(
    session: Session, data: AttendanceCreate, allow_duplicates: bool = False
) -> tuple[Attendance, bool]:
    """Create an attendance record under the selected policy.

    Returns:
        The attendance row and whether it was newly created. ``False`` means
        an existing row was returned and nothing was written.

    Raises:
        ValidationError: If the action or participant is not active.
        StorageError: If the insert fails.
    """
    validate_attendance(session, data)

    if not allow_duplicates:
        existing = find_attendance(session, data.action_id, data.participant_id)
        if existing is not None:
            logger.info(
                f"Attendance for participant {data.participant_id} at action "
                f"{data.action_id} already recorded as {existing.id}"
            )
            return existing, False

    attendance = EntityStore(session).create(Attendance.model_validate(data))
    return attendance, True
