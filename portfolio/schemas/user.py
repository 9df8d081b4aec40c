"""User schemas."""

from pydantic import Field

from portfolio.schemas.base import InsertModel, RecordModel


class UserCreate(InsertModel):
    """Create a new user."""

    username: str = Field(..., min_length=1, max_length=255)
    password: str = Field(..., min_length=1)


class UserRecord(RecordModel):
    """Stored user."""

    id: int
    username: str
    password: str
