"""Key-value store abstraction"""
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, List, Optional

logger = logging.getLogger(__name__)


class KeyValueStore(ABC):
    """
    Synchronous string key -> JSON string value store.
    Stands in for the browser-local storage the client core persists to.
    No transactions, no expiry; last write wins.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        """Return the raw value for key, or None"""

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        """Store value under key. May raise StorageQuotaError."""

    @abstractmethod
    def remove(self, key: str) -> None:
        """Delete key if present"""

    @abstractmethod
    def keys(self) -> List[str]:
        """List stored keys"""

    def get_json(self, key: str) -> Any:
        """
        Read and decode a JSON value.

        Returns None if the key is missing or the stored value is not valid JSON.
        """
        raw = self.get(key)
        if raw is None:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError as e:
            logger.error(f"Error parsing stored value for '{key}': {e}")
            return None

    def set_json(self, key: str, value: Any) -> None:
        """Encode value as JSON and store it"""
        self.set(key, json.dumps(value, ensure_ascii=False))
