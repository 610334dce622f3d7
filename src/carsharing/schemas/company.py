"""Company Pydantic schemas."""

from pydantic import BaseModel, ConfigDict


class Company(BaseModel):
    """A persisted company, read back from the store. Immutable."""

    model_config = ConfigDict(from_attributes=True, frozen=True)

    id: int
    name: str
