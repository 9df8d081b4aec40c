"""Error response bodies."""

from pydantic import BaseModel

from portfolio.schemas.base import FieldIssue


class ErrorResponse(BaseModel):
    """Generic error body."""

    message: str


class ValidationErrorResponse(ErrorResponse):
    """Error body listing every invalid field."""

    errors: list[FieldIssue]
