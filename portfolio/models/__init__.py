"""SQLAlchemy models."""

from portfolio.models.message import Message
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.models.user import User

__all__ = [
    "User",
    "Project",
    "Skill",
    "Message",
]
