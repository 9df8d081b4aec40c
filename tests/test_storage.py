"""Storage backend tests, run against every backend."""

import threading

import pytest

from portfolio.schemas import MessageCreate, ProjectCreate, SkillCreate, UserCreate
from portfolio.storage import MemStorage, UsernameTakenError


def make_project(**overrides) -> ProjectCreate:
    data = {
        "title": "Project",
        "description": "Description",
        "image_url": "https://example.com/image.png",
        "categories": ["data-engineering"],
        "technologies": ["Python"],
        "order": 0,
    }
    data.update(overrides)
    return ProjectCreate.model_validate(data)


def test_create_then_get_project(any_storage):
    """Test that a created project reads back unchanged."""
    created = any_storage.create_project(make_project(github_url="https://github.com"))

    assert created.id == 1
    assert any_storage.get_project_by_id(created.id) == created


def test_get_missing_project_returns_none(any_storage):
    """Test that absence is not an error."""
    assert any_storage.get_project_by_id(999) is None


def test_all_projects_sorted_stably(any_storage):
    """Test sorting by order with ties in creation order."""
    for title, order in [("c", 5), ("a1", 1), ("b", 3), ("a2", 1), ("neg", -2)]:
        any_storage.create_project(make_project(title=title, order=order))

    projects = any_storage.get_all_projects()
    assert [p.title for p in projects] == ["neg", "a1", "a2", "b", "c"]


def test_featured_is_subset(any_storage):
    """Test that featured projects are exactly those flagged."""
    any_storage.create_project(make_project(title="one", featured=True, order=2))
    any_storage.create_project(make_project(title="two"))
    any_storage.create_project(make_project(title="three", featured=True, order=1))

    featured = any_storage.get_featured_projects()
    assert [p.title for p in featured] == ["three", "one"]
    assert all(p in any_storage.get_all_projects() for p in featured)


def test_projects_by_category_membership(any_storage):
    """Test that category matches any position in categories."""
    any_storage.create_project(make_project(title="x", categories=["cloud", "visualization"]))
    any_storage.create_project(make_project(title="y", categories=["visualization"]))

    assert [p.title for p in any_storage.get_projects_by_category("visualization")] == ["x", "y"]
    assert [p.title for p in any_storage.get_projects_by_category("cloud")] == ["x"]
    assert any_storage.get_projects_by_category("Cloud") == []


def test_update_changes_only_given_fields(any_storage):
    """Test merge semantics of update."""
    created = any_storage.create_project(make_project(featured=True, order=4))

    updated = any_storage.update_project(created.id, {"title": "X"})

    assert updated == created.model_copy(update={"title": "X"})
    assert any_storage.get_project_by_id(created.id) == updated


def test_update_ignores_id(any_storage):
    """Test that the id cannot be changed."""
    created = any_storage.create_project(make_project())

    updated = any_storage.update_project(created.id, {"id": 50, "order": 9})

    assert updated.id == created.id
    assert updated.order == 9
    assert any_storage.get_project_by_id(50) is None


def test_update_missing_project(any_storage):
    """Test that updating a missing id changes nothing."""
    created = any_storage.create_project(make_project())

    assert any_storage.update_project(created.id + 1, {"title": "X"}) is None
    assert any_storage.get_all_projects() == [created]


def test_delete_project(any_storage):
    """Test deleting existing and missing projects."""
    first = any_storage.create_project(make_project())
    any_storage.create_project(make_project())

    assert any_storage.delete_project(first.id) is True
    assert any_storage.get_project_by_id(first.id) is None
    assert any_storage.delete_project(first.id) is False
    assert len(any_storage.get_all_projects()) == 1


def test_ids_never_reused(any_storage):
    """Test that deleting the newest project does not free its id."""
    any_storage.create_project(make_project())
    second = any_storage.create_project(make_project())
    any_storage.delete_project(second.id)

    third = any_storage.create_project(make_project())
    assert third.id == 3


def test_counters_are_per_entity(any_storage):
    """Test that each entity type has its own id sequence."""
    any_storage.create_project(make_project())
    any_storage.create_project(make_project())

    skill = any_storage.create_skill(
        SkillCreate(name="SQL", percentage=90, category="data-engineering")
    )
    assert skill.id == 1


def test_skills_by_category(any_storage):
    """Test exact category matching, sorted by order."""
    any_storage.create_skill(SkillCreate(name="D3.js", percentage=80, category="viz", order=3))
    any_storage.create_skill(SkillCreate(name="Kafka", percentage=75, category="de", order=1))
    any_storage.create_skill(SkillCreate(name="Tableau", percentage=90, category="viz", order=1))

    assert [s.name for s in any_storage.get_skills_by_category("viz")] == ["Tableau", "D3.js"]
    assert [s.name for s in any_storage.get_all_skills()] == ["Kafka", "Tableau", "D3.js"]


def test_create_message_stamps_time(any_storage):
    """Test that messages get a UTC timestamp."""
    message = any_storage.create_message(
        MessageCreate(name="A", email="a@b.com", subject="S", message="M")
    )

    assert message.id == 1
    assert message.created_at.tzinfo is not None
    assert any_storage.get_messages() == [message]


def test_users(any_storage):
    """Test creating and finding users."""
    user = any_storage.create_user(UserCreate(username="admin", password="secret"))

    assert any_storage.get_user(user.id) == user
    assert any_storage.get_user_by_username("admin") == user
    assert any_storage.get_user_by_username("nobody") is None
    assert any_storage.get_user(user.id + 1) is None


def test_duplicate_username(any_storage):
    """Test that usernames are unique."""
    any_storage.create_user(UserCreate(username="admin", password="secret"))

    with pytest.raises(UsernameTakenError):
        any_storage.create_user(UserCreate(username="admin", password="other"))

    second = any_storage.create_user(UserCreate(username="guest", password="secret"))
    assert any_storage.get_user(second.id).username == "guest"


def test_concurrent_creates_get_distinct_ids(any_storage):
    """Test that parallel creates never share an id."""
    results = []
    barrier = threading.Barrier(8)

    def create(index):
        barrier.wait()
        results.append(any_storage.create_project(make_project(title=f"p{index}")))

    threads = [threading.Thread(target=create, args=(i,)) for i in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert sorted(project.id for project in results) == list(range(1, 9))


def test_records_cannot_be_mutated():
    """Test that callers cannot change stored records in place."""
    storage = MemStorage()
    created = storage.create_project(make_project())

    with pytest.raises(ValueError):
        created.title = "changed"
    assert storage.get_project_by_id(created.id).title == "Project"


def test_record_lists_cannot_be_mutated(any_storage):
    """Test that categories and technologies on a record are read-only."""
    created = any_storage.create_project(make_project(categories=["cloud"]))

    with pytest.raises(AttributeError):
        created.categories.append("leaked")
    with pytest.raises(AttributeError):
        any_storage.get_all_projects()[0].technologies.append("leaked")

    stored = any_storage.get_project_by_id(created.id)
    assert stored.categories == ("cloud",)
    assert stored.technologies == ("Python",)
    assert any_storage.get_projects_by_category("leaked") == []


def test_input_lists_are_copied():
    """Test that changing the list a project was created from leaves it alone."""
    storage = MemStorage()
    categories = ["cloud"]
    created = storage.create_project(make_project(categories=categories))

    categories.append("leaked")

    assert storage.get_project_by_id(created.id).categories == ("cloud",)


def test_repositories_are_independent():
    """Test that two storages keep separate counters."""
    first = MemStorage()
    second = MemStorage()
    first.create_project(make_project())

    assert second.create_project(make_project()).id == 1
