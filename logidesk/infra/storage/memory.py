"""In-memory key-value store with a browser-like capacity limit"""
from typing import Dict, List, Optional

from logidesk.errors import StorageQuotaError

from .base import KeyValueStore


class InMemoryKeyValueStore(KeyValueStore):
    """Dict-backed store. Size is measured as len(key) + len(value) over all entries."""

    def __init__(self, quota_bytes: Optional[int] = None):
        self._data: Dict[str, str] = {}
        self._quota_bytes = quota_bytes

    @property
    def quota_bytes(self) -> Optional[int]:
        return self._quota_bytes

    def used_bytes(self) -> int:
        return sum(len(k) + len(v) for k, v in self._data.items())

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._check_quota(key, value)
        self._data[key] = value

    def remove(self, key: str) -> None:
        self._data.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._data.keys())

    def _check_quota(self, key: str, value: str) -> None:
        if self._quota_bytes is None:
            return

        current = self._data.get(key)
        replaced = len(key) + len(current) if current is not None else 0
        required = self.used_bytes() - replaced + len(key) + len(value)

        if required > self._quota_bytes:
            raise StorageQuotaError(key, required, self._quota_bytes)
