"""
Database connection, session management, and table creation.
Uses SQLAlchemy with PostgreSQL (SQLite works for local runs and tests).
All models are auto-imported here so create_tables() creates every table in one call.
"""

from contextlib import contextmanager
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from app.config import settings
from app.services.errors import BookingError, PersistenceFailure


def build_engine(url: str):
    """Create an engine with pool settings that suit the target dialect."""
    if url.startswith("sqlite"):
        # SQLite serialises writers itself; wait on the lock instead of failing fast
        return create_engine(
            url,
            connect_args={"check_same_thread": False, "timeout": 30},
            echo=False,
        )
    return create_engine(
        url,
        pool_pre_ping=True,          # Auto-reconnect if DB connection drops
        pool_size=10,
        max_overflow=20,
        echo=False,                  # Set True to log all SQL queries (debug only)
    )


engine = build_engine(settings.DATABASE_URL)

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def get_db():
    """FastAPI dependency — yields a DB session and closes it after request."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def atomic(db: Session, action: str):
    """
    Run one storage step as its own transaction: commit on success, roll back on any error.
    Driver/ORM errors surface as PersistenceFailure so callers see a single fault type.
    """
    try:
        yield db
        db.commit()
    except BookingError:
        db.rollback()
        raise
    except SQLAlchemyError as e:
        db.rollback()
        raise PersistenceFailure(f"Could not {action}: storage error") from e


def create_tables(bind=None):
    """
    Creates all DB tables on startup. Safe to call multiple times.
    Import all models here so SQLAlchemy knows about them.
    """
    from app.models.user import User          # noqa
    from app.models.cab import Cab            # noqa
    from app.models.booking import Booking    # noqa
    from app.models.note import Note          # noqa

    Base.metadata.create_all(bind=bind or engine)
