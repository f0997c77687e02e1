"""
Database setup - engine, session factory and declarative base.

SQLite in-memory databases live inside a single connection, so the engine
is built with a StaticPool in that case to share it across sessions.
"""

from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from hello_mvc.config import get_settings

settings = get_settings()


def _create_engine(url: str):
    if url.startswith("sqlite"):
        return create_engine(
            url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(url, pool_pre_ping=True)


engine = _create_engine(settings.database_url)
SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
Base = declarative_base()


def get_db():
    """Yield a database session and close it when the request is done."""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def init_db(bind=None) -> None:
    """Create all tables that do not exist yet."""
    # Entities must be imported so they register on Base.metadata
    from hello_mvc.models import entities  # noqa: F401

    Base.metadata.create_all(bind=bind or engine)
