"""Project model."""

from sqlalchemy import JSON, Boolean, Column, Integer, String, Text

from portfolio.database import Base


class Project(Base):
    """Project shown in the portfolio showcase."""

    __tablename__ = "projects"
    __table_args__ = {"sqlite_autoincrement": True}

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    image_url = Column(Text, nullable=False)

    # Ordered lists of tags and technology names
    categories = Column(JSON, nullable=False, default=list)
    technologies = Column(JSON, nullable=False, default=list)

    github_url = Column(Text, nullable=True)
    live_url = Column(Text, nullable=True)
    featured = Column(Boolean, nullable=False, default=False)
    order = Column("sort_order", Integer, nullable=False, default=0, index=True)
