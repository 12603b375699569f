"""
Database configuration and session management.
"""
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from contextlib import contextmanager
from typing import Generator
import logging

from tour_ratings.core.config import settings
from tour_ratings.core.models import Base

logger = logging.getLogger(__name__)

# SQLite connections are shared across the threadpool FastAPI runs sync routes in
connect_args = {"check_same_thread": False} if settings.is_sqlite else {}

engine = create_engine(
    settings.database_url,
    connect_args=connect_args,
    echo=settings.sql_echo
)

# Create session factory
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    """Create the tour, tour package and rating tables if missing."""
    logger.info(f"Creating tables on {engine.url.render_as_string(hide_password=True)}")
    Base.metadata.create_all(bind=engine)
    logger.info("Tables ready")


def drop_db():
    """Drop every table, ratings included. Used by `init_db --drop`."""
    logger.warning("Dropping tour and rating tables")
    Base.metadata.drop_all(bind=engine)


@contextmanager
def get_db_context() -> Generator[Session, None, None]:
    """Session for scripts such as the seed loader; commits on success."""
    db = SessionLocal()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def get_db() -> Generator[Session, None, None]:
    """Per-request session for the rating routes."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
