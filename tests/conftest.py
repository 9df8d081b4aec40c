"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from portfolio.api.dependencies import get_storage
from portfolio.main import app
from portfolio.storage import MemStorage, SqlStorage


@pytest.fixture
def storage():
    """A fresh, empty in-memory storage for each test."""
    return MemStorage()


@pytest.fixture
def client(storage):
    """Create a test client with the storage override."""
    app.dependency_overrides[get_storage] = lambda: storage
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture(params=["memory", "sql"])
def any_storage(request):
    """Each storage backend, empty."""
    if request.param == "memory":
        yield MemStorage()
    else:
        sql_storage = SqlStorage("sqlite:///:memory:")
        yield sql_storage
        sql_storage.engine.dispose()


@pytest.fixture
def project_payload():
    """A valid project as the site would post it."""
    return {
        "title": "Cloud Data Warehouse",
        "description": "Consolidated data from multiple sources",
        "imageUrl": "https://example.com/warehouse.png",
        "categories": ["data-engineering", "cloud"],
        "technologies": ["AWS Redshift", "Airflow"],
        "githubUrl": "https://github.com/example/warehouse",
        "liveUrl": "https://example.com",
        "featured": True,
        "order": 1,
    }
