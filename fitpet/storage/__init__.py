from __future__ import annotations

from loguru import logger

from fitpet.core.settings import Settings
from fitpet.storage.base import Storage
from fitpet.storage.memory import MemStorage
from fitpet.storage.sql import SqlStorage

__all__ = ["MemStorage", "SqlStorage", "Storage", "create_storage"]


def create_storage(settings: Settings) -> Storage:
    """Build the storage backend selected in settings."""
    if settings.storage_backend == "sql":
        logger.info("Using SQL storage backend")
        return SqlStorage(settings.database_url)
    logger.info("Using in-memory storage backend")
    return MemStorage()
