"""Key-value store backends and factory"""
import logging
from typing import Optional

from logidesk.config import Settings, get_settings

from .base import KeyValueStore
from .json_file import JsonFileKeyValueStore
from .memory import InMemoryKeyValueStore
from .supabase_store import SupabaseKeyValueStore

logger = logging.getLogger(__name__)


def get_key_value_store(settings: Optional[Settings] = None) -> KeyValueStore:
    """Build the configured store backend"""
    settings = settings or get_settings()
    backend = settings.storage_backend.lower()

    if backend == "memory":
        store: KeyValueStore = InMemoryKeyValueStore(quota_bytes=settings.storage_quota_bytes)
    elif backend == "json":
        store = JsonFileKeyValueStore(settings.storage_path, quota_bytes=settings.storage_quota_bytes)
    elif backend == "supabase":
        from logidesk.infra.supabase import get_supabase_client
        store = SupabaseKeyValueStore(get_supabase_client(settings))
    else:
        raise ValueError(f"Unknown STORAGE_BACKEND: {settings.storage_backend}")

    logger.info(f"Using {backend} key-value store")
    return store


__all__ = [
    'KeyValueStore',
    'InMemoryKeyValueStore',
    'JsonFileKeyValueStore',
    'SupabaseKeyValueStore',
    'get_key_value_store',
]
