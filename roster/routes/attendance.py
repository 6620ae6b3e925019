"""Attendance routes."""
from fastapi import APIRouter, Depends
from sqlmodel import Session

from roster.core.database import get_session
from roster.core.errors import DuplicateNoOp
from roster.ledger import aggregation
from roster.ledger.attendance import parse_allow_duplicates, record_attendance
from roster.ledger.store import EntityStore
from roster.models import (
    Attendance,
    AttendanceCreate,
    AttendanceRead,
    AttendanceWithContext,
)

router = APIRouter(prefix="/attendance", tags=["attendance"])


@router.get("", response_model=list[AttendanceWithContext])
async def list_attendance(session: Session = Depends(get_session)):
    """List active attendance records with participant and action."""
    return aggregation.attendance_with_context(session)


@router.get("/{attendance_id}", response_model=AttendanceWithContext)
async def get_attendance(attendance_id: int, session: Session = Depends(get_session)):
    """Get one attendance record with participant and action."""
    return aggregation.attendance_record_with_context(session, attendance_id)


@router.post("", response_model=AttendanceRead)
async def create_attendance(
    data: AttendanceCreate,
    allow_duplicates: str = "false",
    session: Session = Depends(get_session),
):
    """
    Record attendance of a participant at an action.

    With ``allow_duplicates=true`` a new row is always inserted. Otherwise an
    existing active record for the same action and participant short-circuits
    the request with 304 Not Modified; ``Content-Location`` points at it.
    """
    attendance, created = record_attendance(
        session, data, allow_duplicates=parse_allow_duplicates(allow_duplicates)
    )
    if not created:
        raise DuplicateNoOp(attendance.id)
    return attendance


@router.delete("/{attendance_id}", response_model=AttendanceRead | None)
async def delete_attendance(attendance_id: int, session: Session = Depends(get_session)):
    """Soft-delete an attendance record. Deleting twice is not an error."""
    return EntityStore(session).delete(Attendance, attendance_id)
