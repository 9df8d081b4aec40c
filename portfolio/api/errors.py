"""Error handling shared by the API routers."""

import logging
import re
from collections.abc import Iterator
from contextlib import contextmanager

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from portfolio.schemas import ErrorResponse, SchemaValidationError, ValidationErrorResponse
from portfolio.schemas.base import field_issues

logger = logging.getLogger(__name__)

INTEGER_ID = re.compile(r"-?\d+", re.ASCII)


@contextmanager
def unexpected_errors(message: str) -> Iterator[None]:
    """Turn any unexpected failure into a 500 carrying ``message``.

    The traceback is logged; the client only sees the message.
    """
    try:
        yield
    except (HTTPException, SchemaValidationError):
        raise
    except Exception as e:
        logger.exception(f"{message}: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=message,
        ) from e


def parse_id(raw: str, message: str) -> int:
    """Parse a path id, raising 400 if it is not a plain decimal integer.

    Signs other than a leading minus, underscores, whitespace and non-ASCII
    digits are rejected even though int() would accept them.
    """
    if not INTEGER_ID.fullmatch(raw):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=message)
    return int(raw)


async def http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Render HTTP errors as ``{"message": ...}``."""
    return JSONResponse(
        status_code=exc.status_code,
        content=ErrorResponse(message=str(exc.detail)).model_dump(),
        headers=getattr(exc, "headers", None),
    )


async def schema_validation_handler(request: Request, exc: SchemaValidationError) -> JSONResponse:
    """Render payload validation failures as 400 with every failing field."""
    body = ValidationErrorResponse(message=exc.message, errors=exc.errors)
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Render malformed requests (bad JSON, missing body) like payload failures."""
    body = ValidationErrorResponse(
        message="Invalid request",
        errors=field_issues(exc.errors(), skip_prefix=True),
    )
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log a fault raised outside any route's own handling and hide its details."""
    logger.error(f"Unhandled error on {request.method} {request.url.path}: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(message="Internal server error").model_dump(),
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the error handlers on the application."""
    app.add_exception_handler(StarletteHTTPException, http_exception_handler)
    app.add_exception_handler(SchemaValidationError, schema_validation_handler)
    app.add_exception_handler(RequestValidationError, request_validation_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)
