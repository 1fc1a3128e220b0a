# /academic-records/records/db/database.py

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ..core.config import settings


def build_engine(database_url: str):
    # The 'check_same_thread' argument is only needed for SQLite.
    engine_args = {"connect_args": {"check_same_thread": False}} if database_url.startswith("sqlite") else {}
    return create_engine(database_url, **engine_args)


engine = build_engine(settings.DATABASE_URL)

# Each instance of SessionLocal is a database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db(bind=None) -> None:
    """Creates the snapshot tables if they do not exist yet."""
    from .base import Base
    Base.metadata.create_all(bind=bind or engine)
