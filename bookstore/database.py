"""Database engine and helpers.

This module configures the SQLModel/SQLAlchemy engine from the active
profile: the `dev` profile points at an embedded SQLite file at the
repository root (`bookstore.db`), the `prod` profile at the external
database named by `BOOKSTORE_DATABASE_URL`.
"""

from sqlmodel import SQLModel, create_engine, Session
from .config import settings


def _build_engine(url: str, sqlite: bool):
    connect_args = {"check_same_thread": False} if sqlite else {}
    return create_engine(url, echo=False, connect_args=connect_args, pool_pre_ping=not sqlite)


engine = _build_engine(settings.DATABASE_URL, settings.is_sqlite)


def create_db_and_tables():
    """Create database tables using SQLModel metadata.

    This function is intended for local development and the embedded
    profile; an external production database is expected to accept the
    same `create_all` call since the schema is a single table.
    """
    # import registers the table on SQLModel.metadata
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)


def get_session():
    """Yield a database `Session` for FastAPI dependency injection.

    The generator yields a session and ensures it is closed when the
    request scope finishes.
    """
    with Session(engine) as session:
        yield session
