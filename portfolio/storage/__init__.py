"""Storage backends for portfolio records."""

import logging

from portfolio.config import Settings
from portfolio.storage.base import Storage, UsernameTakenError
from portfolio.storage.memory import MemStorage
from portfolio.storage.seed import seed_sample_data
from portfolio.storage.sql import SqlStorage

logger = logging.getLogger(__name__)


def build_storage(settings: Settings) -> Storage:
    """Create the configured storage backend, seeded if enabled."""
    storage: Storage
    if settings.storage_backend == "database":
        storage = SqlStorage(settings.database_url)
    else:
        storage = MemStorage()
    logger.info(f"Using {settings.storage_backend} storage")

    if settings.seed_sample_data:
        seed_sample_data(storage)
    return storage


__all__ = [
    "Storage",
    "UsernameTakenError",
    "MemStorage",
    "SqlStorage",
    "build_storage",
    "seed_sample_data",
]
