"""Database models package."""

from carsharing.models.company import CompanyModel

__all__ = ["CompanyModel"]
