"""Contact form endpoint."""

import logging
from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends, status

from portfolio.api.dependencies import get_storage
from portfolio.api.errors import unexpected_errors
from portfolio.schemas import ContactAcknowledgement, ContactSubmission, parse_payload
from portfolio.storage import Storage

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["contact"])


@router.post(
    "/contact",
    response_model=ContactAcknowledgement,
    status_code=status.HTTP_201_CREATED,
)
def submit_contact(
    payload: Annotated[Any, Body()],
    storage: Annotated[Storage, Depends(get_storage)],
):
    """Store a contact form message. The stored message is not echoed back."""
    message_data = parse_payload(ContactSubmission, payload, "Invalid message data")

    with unexpected_errors("Failed to send message"):
        message = storage.create_message(message_data)

    logger.info(f"Stored contact message {message.id}")
    return ContactAcknowledgement()
