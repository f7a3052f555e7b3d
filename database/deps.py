"""FastAPI dependencies that hand out database sessions.

Write endpoints (logging meals, storing plans) depend on `get_db_write`;
read-only endpoints use `get_db_read` so they can be routed to a replica
through `READ_DATABASE_URL`. Tests override both with an in-memory engine.
"""

from .database import get_read_session, get_write_session


def get_db_write():
    """Yield a write-capable session for one request."""
    yield from get_write_session()


def get_db_read():
    """Yield a read-only session for one request."""
    yield from get_read_session()
