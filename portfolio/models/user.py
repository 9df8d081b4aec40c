"""User model."""

from sqlalchemy import Column, Integer, String

from portfolio.database import Base


class User(Base):
    """Site owner account."""

    __tablename__ = "users"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False)
