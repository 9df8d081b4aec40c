"""SQLAlchemy storage backend."""

import logging
import threading
from datetime import UTC, datetime
from typing import Any

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from portfolio.database import create_db_engine, create_session_factory, init_db
from portfolio.models import Message, Project, Skill, User
from portfolio.schemas import (
    MessageCreate,
    MessageRecord,
    ProjectCreate,
    ProjectRecord,
    SkillCreate,
    SkillRecord,
    UserCreate,
    UserRecord,
)
from portfolio.storage.base import UsernameTakenError, project_changes

logger = logging.getLogger(__name__)


def _message_record(row: Message) -> MessageRecord:
    record = MessageRecord.model_validate(row)
    # SQLite drops the timezone on the way back
    if record.created_at.tzinfo is None:
        record = record.model_copy(update={"created_at": record.created_at.replace(tzinfo=UTC)})
    return record


class SqlStorage:
    """Stores every collection in a relational database.

    Each call runs in its own session. Tables are created on construction.
    Calls are serialized through a lock so SQLite's single shared connection
    is never used from two threads at once.
    """

    def __init__(self, database_url: str):
        self.engine = create_db_engine(database_url)
        init_db(self.engine)
        self._session_factory = create_session_factory(self.engine)
        self._lock = threading.Lock()
        logger.info(f"SQL storage ready at {self.engine.url.render_as_string(hide_password=True)}")

    def _session(self) -> Session:
        return self._session_factory()

    # Users

    def get_user(self, user_id: int) -> UserRecord | None:
        with self._lock, self._session() as db:
            user = db.get(User, user_id)
            return UserRecord.model_validate(user) if user else None

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._lock, self._session() as db:
            user = db.query(User).filter(User.username == username).first()
            return UserRecord.model_validate(user) if user else None

    def create_user(self, data: UserCreate) -> UserRecord:
        with self._lock, self._session() as db:
            user = User(**data.model_dump())
            db.add(user)
            try:
                db.commit()
            except IntegrityError:
                db.rollback()
                raise UsernameTakenError(data.username) from None
            db.refresh(user)
            return UserRecord.model_validate(user)

    # Projects

    def get_all_projects(self) -> list[ProjectRecord]:
        with self._lock, self._session() as db:
            projects = db.query(Project).order_by(Project.order, Project.id).all()
            return [ProjectRecord.model_validate(p) for p in projects]

    def get_project_by_id(self, project_id: int) -> ProjectRecord | None:
        with self._lock, self._session() as db:
            project = db.get(Project, project_id)
            return ProjectRecord.model_validate(project) if project else None

    def get_featured_projects(self) -> list[ProjectRecord]:
        with self._lock, self._session() as db:
            projects = (
                db.query(Project)
                .filter(Project.featured.is_(True))
                .order_by(Project.order, Project.id)
                .all()
            )
            return [ProjectRecord.model_validate(p) for p in projects]

    def get_projects_by_category(self, category: str) -> list[ProjectRecord]:
        # JSON containment is not portable across dialects, so filter here
        return [p for p in self.get_all_projects() if category in p.categories]

    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        with self._lock, self._session() as db:
            project = Project(**data.model_dump())
            db.add(project)
            db.commit()
            db.refresh(project)
            return ProjectRecord.model_validate(project)

    def update_project(self, project_id: int, changes: dict[str, Any]) -> ProjectRecord | None:
        with self._lock, self._session() as db:
            project = db.get(Project, project_id)
            if project is None:
                return None

            changes = project_changes(changes)
            # Validate the merged result so a bad value never gets stored
            ProjectRecord.model_validate(ProjectRecord.model_validate(project).model_dump() | changes)

            for field, value in changes.items():
                setattr(project, field, value)
            db.commit()
            db.refresh(project)
            return ProjectRecord.model_validate(project)

    def delete_project(self, project_id: int) -> bool:
        with self._lock, self._session() as db:
            project = db.get(Project, project_id)
            if project is None:
                return False
            db.delete(project)
            db.commit()
            return True

    # Skills

    def get_all_skills(self) -> list[SkillRecord]:
        with self._lock, self._session() as db:
            skills = db.query(Skill).order_by(Skill.order, Skill.id).all()
            return [SkillRecord.model_validate(s) for s in skills]

    def get_skills_by_category(self, category: str) -> list[SkillRecord]:
        with self._lock, self._session() as db:
            skills = (
                db.query(Skill)
                .filter(Skill.category == category)
                .order_by(Skill.order, Skill.id)
                .all()
            )
            return [SkillRecord.model_validate(s) for s in skills]

    def create_skill(self, data: SkillCreate) -> SkillRecord:
        with self._lock, self._session() as db:
            skill = Skill(**data.model_dump())
            db.add(skill)
            db.commit()
            db.refresh(skill)
            return SkillRecord.model_validate(skill)

    # Messages

    def create_message(self, data: MessageCreate) -> MessageRecord:
        with self._lock, self._session() as db:
            message = Message(**data.model_dump(), created_at=datetime.now(UTC))
            db.add(message)
            db.commit()
            db.refresh(message)
            return _message_record(message)

    def get_messages(self) -> list[MessageRecord]:
        with self._lock, self._session() as db:
            messages = db.query(Message).order_by(Message.id).all()
            return [_message_record(m) for m in messages]
