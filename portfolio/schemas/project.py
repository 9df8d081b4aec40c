"""Project schemas."""

from pydantic import Field, field_validator

from portfolio.schemas.base import InsertModel, RecordModel


class ProjectCreate(InsertModel):
    """Create a new project."""

    title: str = Field(..., max_length=255)
    description: str
    image_url: str
    categories: list[str]
    technologies: list[str]
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    order: int = 0


class ProjectUpdate(InsertModel):
    """Update a project. Only the fields sent are changed."""

    title: str | None = Field(None, max_length=255)
    description: str | None = None
    image_url: str | None = None
    categories: list[str] | None = None
    technologies: list[str] | None = None
    github_url: str | None = None
    live_url: str | None = None
    featured: bool | None = None
    order: int | None = None

    @field_validator(
        "title", "description", "image_url", "categories", "technologies", "featured", "order"
    )
    @classmethod
    def reject_null(cls, value):
        # Only runs for fields that were sent; links are the only nullable fields
        if value is None:
            raise ValueError("Field may not be null")
        return value


class ProjectRecord(RecordModel):
    """Stored project."""

    id: int
    title: str
    description: str
    image_url: str
    categories: tuple[str, ...]
    technologies: tuple[str, ...]
    github_url: str | None = None
    live_url: str | None = None
    featured: bool = False
    order: int = 0
