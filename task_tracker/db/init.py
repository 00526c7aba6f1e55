"""Initialize database tables."""
import logging

from sqlmodel import SQLModel
from sqlalchemy.engine import Engine

from task_tracker.models.task import Task  # noqa: F401  registers the table
from task_tracker.db.config import engine as default_engine

logger = logging.getLogger(__name__)


def init_db(engine: Engine = default_engine) -> None:
    """Create all tables in the database."""
    logger.info("Creating all tables...")
    SQLModel.metadata.create_all(engine)
    logger.info("Tables created successfully.")


if __name__ == "__main__":
    init_db()
