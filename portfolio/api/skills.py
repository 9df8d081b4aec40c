"""Skill API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from portfolio.api.dependencies import get_storage
from portfolio.api.errors import unexpected_errors
from portfolio.schemas import SkillCreate, SkillRecord, parse_payload
from portfolio.storage import Storage

router = APIRouter(prefix="/api", tags=["skills"])


@router.get("/skills", response_model=list[SkillRecord])
def get_skills(
    storage: Annotated[Storage, Depends(get_storage)],
    category: str | None = None,
):
    """Get skills sorted by display order, optionally for one category."""
    with unexpected_errors("Failed to fetch skills"):
        if category:
            return storage.get_skills_by_category(category)
        return storage.get_all_skills()


@router.post("/skills", response_model=SkillRecord, status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: Annotated[Any, Body()],
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Create a new skill."""
    skill_data = parse_payload(SkillCreate, payload, "Invalid skill data")

    with unexpected_errors("Failed to create skill"):
        return storage.create_skill(skill_data)
