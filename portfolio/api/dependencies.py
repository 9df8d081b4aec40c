"""FastAPI dependencies."""

from fastapi import Request

from portfolio.storage import Storage


def get_storage(request: Request) -> Storage:
    """Get the storage backend created at startup."""
    return request.app.state.storage
