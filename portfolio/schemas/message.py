"""Message and contact form schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from portfolio.schemas.base import InsertModel, RecordModel


class MessageCreate(InsertModel):
    """Create a new message."""

    name: str = Field(..., max_length=255)
    email: str = Field(..., max_length=255)
    subject: str = Field(..., max_length=255)
    message: str = Field(..., max_length=5000)


class ContactSubmission(MessageCreate):
    """Contact form submission; the email must be a real address."""

    email: EmailStr = Field(..., max_length=255)


class MessageRecord(RecordModel):
    """Stored message."""

    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime


class ContactAcknowledgement(BaseModel):
    """Response to a contact form submission."""

    success: bool = True
    message: str = "Message sent successfully"
