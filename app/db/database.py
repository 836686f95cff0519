# /app/db/database.py

import logging

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker

from app.core import config
from .base_class import Base

logger = logging.getLogger(__name__)

DATABASE_URL = config.DATABASE_URL

# The 'check_same_thread' argument is only needed for SQLite.
engine_args = {"connect_args": {"check_same_thread": False}} if DATABASE_URL.startswith("sqlite") else {}
engine = create_engine(DATABASE_URL, **engine_args)

# Each instance of this class is a request-scoped database session.
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


def init_db() -> None:
    """Creates any missing tables. Runs once from the application lifespan."""
    # Imported for its side effect of registering every model on Base.
    from . import base  # noqa: F401

    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured on %s", engine.url.render_as_string(hide_password=True))


def ping(db) -> None:
    db.execute(text("SELECT 1"))


# Dependency to get a DB session. Used by the API routers.
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
