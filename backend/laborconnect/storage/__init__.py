"""
Entity store backends
"""
import logging
from ..core.config import Settings
from .base import EntityStore
from .memory import MemoryStore
from .sql import SqlStore

logger = logging.getLogger(__name__)

__all__ = ["EntityStore", "MemoryStore", "SqlStore", "create_store"]


def create_store(settings: Settings) -> EntityStore:
    """Build the store selected by STORAGE_BACKEND"""
    backend = settings.STORAGE_BACKEND.lower()
    if backend == "memory":
        logger.info("Using in-memory entity store")
        return MemoryStore()
    if backend == "sql":
        logger.info(f"Using SQL entity store at {settings.DATABASE_URL.split('@')[-1]}")
        return SqlStore(settings.DATABASE_URL)
    raise ValueError(f"Unknown STORAGE_BACKEND: {settings.STORAGE_BACKEND}")
