"""Database connection and session management.

This module handles the database connection using SQLAlchemy.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from config import DATA_DIR, DATABASE_ECHO, DATABASE_URL
from models.base import Base
# Import models to ensure they are registered with Base.metadata
import models  # noqa: F401


def _engine_kwargs(url: str) -> dict:
    """Build engine options for the configured database URL."""
    if not url.startswith("sqlite"):
        return {"pool_pre_ping": True}
    kwargs = {"connect_args": {"check_same_thread": False}}
    # In-memory SQLite lives inside a single connection; share it across threads
    if url in ("sqlite://", "sqlite:///:memory:"):
        kwargs["poolclass"] = StaticPool
    return kwargs


if DATABASE_URL.startswith(f"sqlite:///{DATA_DIR}"):
    DATA_DIR.mkdir(parents=True, exist_ok=True)

engine = create_engine(DATABASE_URL, echo=DATABASE_ECHO, **_engine_kwargs(DATABASE_URL))

SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db():
    Base.metadata.create_all(bind=engine)


# Initialize DB (create tables if not exist)
init_db()


def get_db():
    """Dependency for getting a database session."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
