"""Database configuration and session management.

The engine is built from ``settings.sqlalchemy_url``. PostgreSQL is the
production target (DB_HOST, DB_PORT, DB_USER, DB_NAME, DB_PASSWORD); a local
SQLite file is used when nothing is configured.

SQLite Configuration Choices:
    - **WAL (Write-Ahead Logging)**: concurrent readers while a request
      writes.
    - **Foreign Keys**: disabled by default in SQLite, enabled here so
      ``team.location_id`` and friends must reference real rows.
    - **check_same_thread=False**: FastAPI may hand a session to a
      different thread than the one that opened the connection.
"""

from sqlalchemy import event as sa_event
from sqlmodel import Session, SQLModel, create_engine

from roster.core.config import settings


def build_engine(url: str, echo: bool = False):
    """Create an engine, applying the SQLite connection pragmas when needed."""
    is_sqlite = url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}
    engine = create_engine(url, connect_args=connect_args, echo=echo)

    if is_sqlite:
        @sa_event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

    return engine


engine = build_engine(settings.sqlalchemy_url, echo=settings.debug)


def create_db_and_tables():
    """Create all database tables."""
    # Import for side effect: registers every table on SQLModel.metadata
    import roster.models  # noqa: F401

    SQLModel.metadata.create_all(engine)


def get_session():
    """Dependency for getting database session."""
    with Session(engine) as session:
        yield session
