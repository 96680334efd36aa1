"""Shared write path for services persisting to the key-value store"""
import logging
from typing import Any, Optional

from logidesk.errors import StorageQuotaError
from logidesk.infra.storage import KeyValueStore

logger = logging.getLogger(__name__)

QUOTA_NOTICE = "Local storage is full. Changes are kept for this session only."
WRITE_FAILED_NOTICE = "Changes could not be saved. They are kept for this session only."


def persist_json(store: KeyValueStore, key: str, value: Any) -> Optional[str]:
    """
    Write value as JSON under key.

    A quota overflow or a failed file write is not fatal: the caller keeps its in-memory
    state and the returned notice is surfaced to the user. Returns None when the write succeeded.
    """
    try:
        store.set_json(key, value)
        return None
    except StorageQuotaError as e:
        logger.warning(f"Storage quota exceeded, keeping '{key}' in memory only: {e}")
        return QUOTA_NOTICE
    except OSError as e:
        logger.error(f"Error writing '{key}' to store, keeping it in memory only: {e}")
        return WRITE_FAILED_NOTICE
