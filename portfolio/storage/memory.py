"""In-memory storage backend."""

import threading
from datetime import UTC, datetime
from typing import Any

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


def _by_order(records):
    # sorted() is stable and dicts keep insertion order, so ties stay in id order
    return sorted(records, key=lambda record: record.order)


class MemStorage:
    """Keeps every collection in process memory.

    Each entity type has its own id counter starting at 1. Ids are never
    reused, even after a delete. All access goes through one lock.
    """

    def __init__(self):
        self._lock = threading.RLock()

        self._users: dict[int, UserRecord] = {}
        self._projects: dict[int, ProjectRecord] = {}
        self._skills: dict[int, SkillRecord] = {}
        self._messages: dict[int, MessageRecord] = {}

        self._next_user_id = 1
        self._next_project_id = 1
        self._next_skill_id = 1
        self._next_message_id = 1

    # Users

    def get_user(self, user_id: int) -> UserRecord | None:
        with self._lock:
            return self._users.get(user_id)

    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            return next(
                (user for user in self._users.values() if user.username == username),
                None,
            )

    def create_user(self, data: UserCreate) -> UserRecord:
        with self._lock:
            if self.get_user_by_username(data.username) is not None:
                raise UsernameTakenError(data.username)
            user = UserRecord(id=self._next_user_id, **data.model_dump())
            self._users[user.id] = user
            self._next_user_id += 1
            return user

    # Projects

    def get_all_projects(self) -> list[ProjectRecord]:
        with self._lock:
            return _by_order(self._projects.values())

    def get_project_by_id(self, project_id: int) -> ProjectRecord | None:
        with self._lock:
            return self._projects.get(project_id)

    def get_featured_projects(self) -> list[ProjectRecord]:
        with self._lock:
            return _by_order(p for p in self._projects.values() if p.featured)

    def get_projects_by_category(self, category: str) -> list[ProjectRecord]:
        with self._lock:
            return _by_order(p for p in self._projects.values() if category in p.categories)

    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        with self._lock:
            project = ProjectRecord(id=self._next_project_id, **data.model_dump())
            self._projects[project.id] = project
            self._next_project_id += 1
            return project

    def update_project(self, project_id: int, changes: dict[str, Any]) -> ProjectRecord | None:
        with self._lock:
            existing = self._projects.get(project_id)
            if existing is None:
                return None

            # Validate the merged result so a bad value never gets stored
            merged = existing.model_dump() | project_changes(changes)
            updated = ProjectRecord.model_validate(merged)
            self._projects[project_id] = updated
            return updated

    def delete_project(self, project_id: int) -> bool:
        with self._lock:
            return self._projects.pop(project_id, None) is not None

    # Skills

    def get_all_skills(self) -> list[SkillRecord]:
        with self._lock:
            return _by_order(self._skills.values())

    def get_skills_by_category(self, category: str) -> list[SkillRecord]:
        with self._lock:
            return _by_order(s for s in self._skills.values() if s.category == category)

    def create_skill(self, data: SkillCreate) -> SkillRecord:
        with self._lock:
            skill = SkillRecord(id=self._next_skill_id, **data.model_dump())
            self._skills[skill.id] = skill
            self._next_skill_id += 1
            return skill

    # Messages

    def create_message(self, data: MessageCreate) -> MessageRecord:
        with self._lock:
            message = MessageRecord(
                id=self._next_message_id,
                created_at=datetime.now(UTC),
                **data.model_dump(),
            )
            self._messages[message.id] = message
            self._next_message_id += 1
            return message

    def get_messages(self) -> list[MessageRecord]:
        with self._lock:
            return list(self._messages.values())
