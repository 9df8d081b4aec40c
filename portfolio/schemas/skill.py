"""Skill schemas."""

from pydantic import Field

from portfolio.schemas.base import InsertModel, RecordModel


class SkillCreate(InsertModel):
    """Create a new skill."""

    name: str = Field(..., max_length=255)
    percentage: int = Field(..., ge=0, le=100)
    category: str = Field(..., max_length=100)
    order: int = 0


class SkillRecord(RecordModel):
    """Stored skill."""

    id: int
    name: str
    percentage: int
    category: str
    order: int = 0
