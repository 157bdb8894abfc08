"""Database infrastructure setup."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

# One engine and session factory per database URL, created on first use
_session_factories: dict[str, sessionmaker] = {}


def _create_engine(database_url: str) -> Engine:
    """Create the database engine for a URL."""
    if not database_url:
        raise ValueError("DATABASE_URL is required for database operations")
    return create_engine(
        database_url,
        pool_pre_ping=True,  # Verify connections before using
    )


def get_db_session(database_url: str) -> Session:
    """
    Get a database session.

    Args:
        database_url: SQLAlchemy database URL

    Returns:
        SQLAlchemy session instance
    """
    factory = _session_factories.get(database_url)
    if factory is None:
        engine = _create_engine(database_url)
        factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
        _session_factories[database_url] = factory
    return factory()
