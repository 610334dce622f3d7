"""Company database model."""

from sqlalchemy import Column, Integer, String

from carsharing.database import Base


class CompanyModel(Base):
    """
    Company row in the COMPANY table.

    Attributes:
        id: Primary key, assigned by the database starting at 1
        name: Company name (unique, required)
    """

    __tablename__ = "COMPANY"
    # AUTOINCREMENT keeps ids strictly increasing, never reused
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column("ID", Integer, primary_key=True, autoincrement=True)
    name = Column("NAME", String, nullable=False, unique=True)

    def __repr__(self) -> str:
        """String representation of CompanyModel."""
        return f"<CompanyModel(id={self.id}, name='{self.name}')>"
