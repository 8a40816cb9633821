import logging
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.core.config import settings

logger = logging.getLogger(__name__)

# SQLite connections are bound to the creating thread unless told otherwise
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

# Create SQLAlchemy engine
engine = create_engine(
    settings.DATABASE_URL,
    echo=settings.DATABASE_ECHO,
    pool_pre_ping=True,  # Verify connections before using them
    connect_args=connect_args
)

# Create SessionLocal class
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

# Create Base class for models
Base = declarative_base()


def get_db():
    """
    Generator yielding a database session.

    The session is closed once the consumer is done with it, whether it
    finished normally or raised.
    """
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def session_scope(session_factory=SessionLocal) -> Iterator[Session]:
    """
    Provide a transactional scope around a series of operations.

    Commits when the block exits cleanly, rolls back and re-raises on any
    exception, and always releases the session.

    Args:
        session_factory: Callable returning a new Session (defaults to SessionLocal)

    Yields:
        Session bound to the configured engine
    """
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        logger.exception("Rolling back database session after error")
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind=None):
    """
    Initialize database.

    Imports the table mappings so they register on Base.metadata, then
    creates any missing tables. Existing tables are left untouched.
    """
    from app.models import company, computer, real_estate  # noqa: F401  Import models to register them
    Base.metadata.create_all(bind=bind or engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
