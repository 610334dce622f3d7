"""Shared test fixtures.

Every test gets a fresh in-memory SQLite database so tests are fully isolated.
"""

import io

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from carsharing.console import MenuPrinter
from carsharing.logging_config import setup_logging
from carsharing.store import CompanyStore


@pytest.fixture(autouse=True)
def configure_logging():
    """Point logging at the session-wide stderr before each test."""
    setup_logging(json_logs=False, log_level="WARNING")


@pytest.fixture()
def db_engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    yield engine
    engine.dispose()


@pytest.fixture()
def db(db_engine) -> Session:
    session = sessionmaker(autoflush=False, bind=db_engine)()
    yield session
    session.close()


@pytest.fixture()
def store(db: Session) -> CompanyStore:
    """Store with the COMPANY table already created."""
    company_store = CompanyStore(db)
    company_store.ensure_schema()
    return company_store


@pytest.fixture()
def stdout() -> io.StringIO:
    return io.StringIO()


@pytest.fixture()
def printer(stdout: io.StringIO) -> MenuPrinter:
    return MenuPrinter(stdout=stdout)
