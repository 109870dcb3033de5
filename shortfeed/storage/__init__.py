# ============================================================================
# FILE: shortfeed/storage/__init__.py
# ============================================================================
from functools import lru_cache
from shortfeed.config import settings
from shortfeed.storage.base import (
    StorageBackend,
    ConditionFailed,
    UsernameTaken,
    AlreadyLiked,
    StaleWrite,
)
from shortfeed.storage.file_store import FileStorage
from shortfeed.storage.sql_store import SqlStorage

def build_store(backend: str) -> StorageBackend:
    """Instantiate the configured backend"""
    backend = (backend or "").lower()
    if backend == "sql":
        return SqlStorage(settings.DATABASE_URL)
    if backend == "file":
        return FileStorage(settings.DATA_DIR)
    raise ValueError(f"Unknown STORAGE_BACKEND: {backend!r} (expected 'sql' or 'file')")

@lru_cache()
def get_store() -> StorageBackend:
    """Process-wide storage backend; also the FastAPI dependency for routes"""
    return build_store(settings.STORAGE_BACKEND)
