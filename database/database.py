"""Database helpers: engines, session factories and DB initialization.

Provides read/write session factories and a simple `init_db` helper that
creates the meal-log, diet-plan, meal-completion and health-data tables.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from core import config
from core.logger import get_logger
from .models import Base

logger = get_logger("database")


def _connect_args(url: str) -> dict:
    return {"check_same_thread": False} if url.startswith("sqlite") else {}


# Read/Write partitioning pattern
# In production, set DATABASE_URL and READ_DATABASE_URL to different DB instances.
# For SQLite this defaults to the same file but the interfaces are separated.
write_engine = create_engine(config.DATABASE_URL, connect_args=_connect_args(config.DATABASE_URL))
read_engine = create_engine(config.READ_DATABASE_URL, connect_args=_connect_args(config.READ_DATABASE_URL))

# Session factories
WriteSessionLocal = sessionmaker(bind=write_engine)
ReadSessionLocal = sessionmaker(bind=read_engine)


def init_db(engine=None):
    """Create all tables that do not exist yet."""
    Base.metadata.create_all(bind=engine or write_engine)
    logger.info("Database schema ready")


# Convenience generators for dependency injection
def get_write_session():
    """Yield a write-enabled SQLAlchemy session for the request scope.

    Use this generator as a FastAPI dependency to ensure the session is
    properly closed after the request completes.
    """
    db = WriteSessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_read_session():
    """Yield a read-only SQLAlchemy session for the request scope."""
    db = ReadSessionLocal()
    try:
        yield db
    finally:
        db.close()
