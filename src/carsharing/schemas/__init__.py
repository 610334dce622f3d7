"""Pydantic schemas package."""

from carsharing.schemas.company import Company

__all__ = ["Company"]
