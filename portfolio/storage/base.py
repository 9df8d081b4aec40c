"""Storage contract shared by every backend."""

from typing import Any, Protocol

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


class UsernameTakenError(Exception):
    """Raised when creating a user whose username already exists."""

    def __init__(self, username: str):
        super().__init__(f"Username already taken: {username}")
        self.username = username


class Storage(Protocol):
    """Everything the API needs from a storage backend.

    Implementations: MemStorage, SqlStorage. Lookups return None for a missing
    id. Listings of projects and skills are sorted by ``order``, ties in id
    order.
    """

    # Users

    def get_user(self, user_id: int) -> UserRecord | None:
        ...

    def get_user_by_username(self, username: str) -> UserRecord | None:
        ...

    def create_user(self, data: UserCreate) -> UserRecord:
        ...

    # Projects

    def get_all_projects(self) -> list[ProjectRecord]:
        ...

    def get_project_by_id(self, project_id: int) -> ProjectRecord | None:
        ...

    def get_featured_projects(self) -> list[ProjectRecord]:
        ...

    def get_projects_by_category(self, category: str) -> list[ProjectRecord]:
        """Projects listing ``category`` anywhere in their categories."""
        ...

    def create_project(self, data: ProjectCreate) -> ProjectRecord:
        ...

    def update_project(self, project_id: int, changes: dict[str, Any]) -> ProjectRecord | None:
        """Merge ``changes`` (snake_case field names) into a project. ``id`` is ignored."""
        ...

    def delete_project(self, project_id: int) -> bool:
        ...

    # Skills

    def get_all_skills(self) -> list[SkillRecord]:
        ...

    def get_skills_by_category(self, category: str) -> list[SkillRecord]:
        ...

    def create_skill(self, data: SkillCreate) -> SkillRecord:
        ...

    # Messages

    def create_message(self, data: MessageCreate) -> MessageRecord:
        """Store a message stamped with the current UTC time."""
        ...

    def get_messages(self) -> list[MessageRecord]:
        ...


PROJECT_FIELDS = frozenset(ProjectCreate.model_fields)


def project_changes(changes: dict[str, Any]) -> dict[str, Any]:
    """Keep only the project fields that may be changed after creation."""
    return {key: value for key, value in changes.items() if key in PROJECT_FIELDS}
