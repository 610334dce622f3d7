"""Company persistence over a single database connection."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from carsharing.database import Base, create_db_engine, create_session_factory
from carsharing.exceptions import StorageOperationFailed, StorageUnavailable
from carsharing.logging_config import get_logger
from carsharing.models.company import CompanyModel
from carsharing.schemas.company import Company

logger = get_logger(__name__)


class CompanyStore:
    """
    Data access for the COMPANY table.

    Every write is committed as soon as it succeeds; a failed statement is
    rolled back so the session stays usable for the next call.
    """

    def __init__(self, db: Session) -> None:
        """
        Initialize the store.

        Args:
            db: SQLAlchemy session bound to the process-wide connection
        """
        self.db = db

    def ensure_schema(self) -> None:
        """
        Create the COMPANY table if it does not exist yet.

        Safe to call on every startup.

        Raises:
            StorageUnavailable: If the database cannot be opened or the
                table cannot be created
        """
        try:
            Base.metadata.create_all(
                bind=self.db.connection(), tables=[CompanyModel.__table__]
            )
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageUnavailable(f"Could not create the COMPANY table: {e}") from e

    def list_companies(self) -> list[Company]:
        """
        Return every company ordered by ascending id.

        Returns:
            List of Company records; empty when the table has no rows

        Raises:
            StorageOperationFailed: If the query fails
        """
        try:
            rows = self.db.query(CompanyModel).order_by(CompanyModel.id).all()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise StorageOperationFailed(f"Could not list companies: {e}") from e
        return [Company.model_validate(row) for row in rows]

    def insert_company(self, name: str) -> bool:
        """
        Insert one company.

        A duplicate name and any other storage fault are both reported as
        False; the cause is only logged.

        Args:
            name: Company name, stored exactly as given

        Returns:
            True if exactly one row was inserted, False otherwise
        """
        company = CompanyModel(name=name)
        try:
            self.db.add(company)
            self.db.flush()
            inserted = company.id is not None
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.warning("company_insert_failed", name=name, error=str(e))
            return False
        return inserted


@contextmanager
def open_store(database_url: str) -> Iterator[CompanyStore]:
    """
    Open the single process-wide connection and yield a ready store.

    The schema is ensured before the store is handed out. The session and
    engine are released when the block exits, normally or by exception.

    Args:
        database_url: SQLAlchemy database URL

    Yields:
        CompanyStore bound to the open connection

    Raises:
        StorageUnavailable: If the database cannot be opened
    """
    try:
        engine = create_db_engine(database_url)
    except SQLAlchemyError as e:
        raise StorageUnavailable(f"Invalid database URL {database_url!r}: {e}") from e

    db = create_session_factory(engine)()
    try:
        store = CompanyStore(db)
        store.ensure_schema()
        logger.info("store_opened", database_url=database_url)
        yield store
    finally:
        db.close()
        engine.dispose()
        logger.info("store_closed", database_url=database_url)
