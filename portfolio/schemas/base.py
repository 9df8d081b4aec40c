"""Shared schema configuration and payload validation."""

from collections.abc import Iterable
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic import ValidationError as PydanticValidationError
from pydantic.alias_generators import to_camel

ModelT = TypeVar("ModelT", bound=BaseModel)


class CamelModel(BaseModel):
    """Base model exposing camelCase keys on the wire."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class InsertModel(CamelModel):
    """Base for payloads arriving from clients.

    Unknown keys are rejected and primitive types are not coerced.
    """

    model_config = ConfigDict(extra="forbid", strict=True)


class RecordModel(CamelModel):
    """Base for stored records handed out by storage."""

    model_config = ConfigDict(from_attributes=True, frozen=True)


class FieldIssue(BaseModel):
    """A single field that failed validation."""

    field: str
    issue: str


class SchemaValidationError(Exception):
    """Raised when a payload does not match its schema."""

    def __init__(self, message: str, errors: list[FieldIssue]):
        super().__init__(message)
        self.message = message
        self.errors = errors


def field_issues(errors: Iterable[dict[str, Any]], skip_prefix: bool = False) -> list[FieldIssue]:
    """Convert pydantic error dicts into field issues.

    With ``skip_prefix`` the leading location part added by FastAPI
    ("body", "query", "path") is dropped.
    """
    issues = []
    for error in errors:
        loc = list(error.get("loc", ()))
        if skip_prefix and loc and loc[0] in ("body", "query", "path"):
            loc = loc[1:]
        field = ".".join(str(part) for part in loc) or "body"
        issues.append(FieldIssue(field=field, issue=error["msg"]))
    return issues


def parse_payload(schema: type[ModelT], payload: Any, message: str) -> ModelT:
    """Validate an untyped payload against ``schema``.

    Every failing field is reported, not only the first one.
    """
    try:
        return schema.model_validate(payload)
    except PydanticValidationError as e:
        raise SchemaValidationError(message, field_issues(e.errors())) from e
