"""Pydantic schemas for API requests and responses."""

from portfolio.schemas.base import FieldIssue, SchemaValidationError, parse_payload
from portfolio.schemas.errors import ErrorResponse, ValidationErrorResponse
from portfolio.schemas.message import (
    ContactAcknowledgement,
    ContactSubmission,
    MessageCreate,
    MessageRecord,
)
from portfolio.schemas.project import ProjectCreate, ProjectRecord, ProjectUpdate
from portfolio.schemas.skill import SkillCreate, SkillRecord
from portfolio.schemas.user import UserCreate, UserRecord

__all__ = [
    "FieldIssue",
    "SchemaValidationError",
    "parse_payload",
    "ErrorResponse",
    "ValidationErrorResponse",
    "UserCreate",
    "UserRecord",
    "ProjectCreate",
    "ProjectUpdate",
    "ProjectRecord",
    "SkillCreate",
    "SkillRecord",
    "MessageCreate",
    "ContactSubmission",
    "MessageRecord",
    "ContactAcknowledgement",
]
