"""Database configuration for the Task Tracker API."""
from typing import Generator
import logging

from sqlmodel import create_engine, Session
from sqlalchemy import event
from sqlalchemy.engine import Engine

from task_tracker.config import DATABASE_URL, DB_ECHO

logger = logging.getLogger(__name__)


def build_engine(database_url: str = DATABASE_URL, echo: bool = DB_ECHO) -> Engine:
    """Create a SQLModel engine, applying SQLite pragmas when needed."""
    is_sqlite = database_url.startswith("sqlite")
    connect_args = {"check_same_thread": False} if is_sqlite else {}

    engine = create_engine(
        database_url,
        echo=echo,
        connect_args=connect_args,
        pool_pre_ping=not is_sqlite,
    )

    if is_sqlite:
        @event.listens_for(engine, "connect")
        def set_sqlite_pragma(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            # Enable foreign keys and WAL mode for better concurrency
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.execute("PRAGMA journal_mode=WAL")
            cursor.close()

        logger.info("Using SQLite database: %s", database_url)
    else:
        logger.info("Using %s database", engine.dialect.name)

    return engine


engine = build_engine()


def get_session() -> Generator[Session, None, None]:
    """Dependency for getting database sessions."""
    with Session(engine) as session:
        yield session
