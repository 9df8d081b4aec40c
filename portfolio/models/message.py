"""Message model."""

from sqlalchemy import Column, DateTime, Integer, String, Text

from portfolio.database import Base


class Message(Base):
    """Contact form submission. Rows are never updated."""

    __tablename__ = "messages"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False)
    subject = Column(String(255), nullable=False)
    message = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), nullable=False)
