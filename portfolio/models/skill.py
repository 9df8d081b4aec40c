"""Skill model."""

from sqlalchemy import Column, Integer, String

from portfolio.database import Base


class Skill(Base):
    """Skill with a proficiency percentage."""

    __tablename__ = "skills"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    percentage = Column(Integer, nullable=False)
    category = Column(String(100), nullable=False, index=True)
    order = Column("sort_order", Integer, nullable=False, default=0)
