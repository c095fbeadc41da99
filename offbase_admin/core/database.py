"""
Store access for the admin service.

Routes get a request-scoped session through the `get_db` dependency. Code that
runs outside a request (the gate's role lookups, CLI scripts) opens its own
with `standalone_session()`.
"""

import logging
from collections.abc import Generator, Iterator
from contextlib import contextmanager

from sqlalchemy import create_engine, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from offbase_admin.core.config import settings

logger = logging.getLogger(__name__)

engine = create_engine(
    settings.DATABASE_URL,
    pool_pre_ping=True,
    echo=settings.DEBUG,
)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@contextmanager
def standalone_session() -> Iterator[Session]:
    """Session owned by the enclosing block: rolled back if the block raises, closed on exit."""
    db = SessionLocal()
    try:
        yield db
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Generator[Session, None, None]:
    """Request-scoped session for route dependencies."""
    with standalone_session() as db:
        yield db


def database_reachable(db: Session) -> bool:
    """True when a trivial round trip to the store succeeds."""
    try:
        db.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.warning("Database unreachable", exc_info=True)
        return False
    return True
