"""Database engine and session construction."""

from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

# Create Base class for declarative models
Base = declarative_base()


def create_db_engine(database_url: str, echo: bool = False) -> Engine:
    """
    Create the engine backing the store.

    StaticPool keeps exactly one DBAPI connection for the lifetime of the
    engine, so every statement in the process runs on the same connection.

    Args:
        database_url: SQLAlchemy URL, e.g. ``sqlite:////abs/path/carsharing.db``
        echo: Log emitted SQL (development only)

    Returns:
        Engine: SQLAlchemy engine; nothing is connected until first use
    """
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},  # Needed for SQLite
        poolclass=StaticPool,
        echo=echo,
    )


def create_session_factory(engine: Engine) -> sessionmaker:
    """Return a session factory bound to ``engine``."""
    return sessionmaker(autoflush=False, bind=engine)
