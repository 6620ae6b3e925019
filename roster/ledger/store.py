"""Entity store for the five roster tables.

All reads go through ``deleted_at IS NULL``. Deletes only stamp
``deleted_at``. The store never touches team counters; that is
``roster.ledger.counters``' job.
"""
import logging
from typing import TypeVar

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, SQLModel, col, select

from roster.core.errors import NotFound, StorageError
from roster.models.base import LedgerRecord, utcnow

logger = logging.getLogger(__name__)

RecordT = TypeVar("RecordT", bound=LedgerRecord)


def commit_or_raise(session: Session, operation: str) -> None:
    """Commit the session, turning driver failures into StorageError."""
    try:
        session.commit()
    except SQLAlchemyError as exc:
        session.rollback()
        logger.exception(f"Storage failure during {operation}")
        raise StorageError(operation) from exc


class EntityStore:
    """CRUD over soft-deletable records, bound to one session."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, record: RecordT) -> RecordT:
        name = type(record).__name__
        self.session.add(record)
        commit_or_raise(self.session, f"create {name}")
        self.session.refresh(record)
        logger.info(f"Created {name} {record.id}")
        return record

    def get(self, model: type[RecordT], record_id: int) -> RecordT:
        """Return the active record or raise NotFound."""
        record = self.session.get(model, record_id)
        if record is None or not record.is_active:
            raise NotFound(model.__name__, record_id)
        return record

    def exists(self, model: type[LedgerRecord], record_id: int) -> bool:
        record = self.session.get(model, record_id)
        return record is not None and record.is_active

    def list_active(self, model: type[RecordT], *filters) -> list[RecordT]:
        """Return active records matching every filter, in insertion order."""
        statement = select(model).where(col(model.deleted_at).is_(None))
        for condition in filters:
            statement = statement.where(condition)
        statement = statement.order_by(col(model.id))
        return list(self.session.exec(statement).all())

    def update(self, model: type[RecordT], record_id: int, data: SQLModel) -> RecordT:
        """Replace every writable field of an active record."""
        record = self.get(model, record_id)
        record.sqlmodel_update(data.model_dump())
        record.updated_at = utcnow()
        self.session.add(record)
        commit_or_raise(self.session, f"update {model.__name__}")
        self.session.refresh(record)
        logger.info(f"Updated {model.__name__} {record_id}")
        return record

    def delete(self, model: type[RecordT], record_id: int) -> RecordT | None:
        """Soft-delete a record.

        Idempotent: an already deleted record is returned unchanged, and an
        id that never existed returns None instead of raising.
        """
        record = self.session.get(model, record_id)
        if record is None:
            logger.info(f"Delete of unknown {model.__name__} {record_id} ignored")
            return None
        if record.is_active:
            record.deleted_at = utcnow()
            self.session.add(record)
            commit_or_raise(self.session, f"delete {model.__name__}")
            self.session.refresh(record)
            logger.info(f"Deleted {model.__name__} {record_id}")
        return record
