"""JSON file backed key-value store"""
import json
import logging
from pathlib import Path
from typing import Optional, Union

from .memory import InMemoryKeyValueStore

logger = logging.getLogger(__name__)


class JsonFileKeyValueStore(InMemoryKeyValueStore):
    """
    Keeps the whole store in memory and rewrites one JSON file after every mutation.
    The parent directory is created on first write.
    """

    def __init__(self, path: Union[str, Path], quota_bytes: Optional[int] = None):
        super().__init__(quota_bytes=quota_bytes)
        self._path = Path(path)
        self._load()

    @property
    def path(self) -> Path:
        return self._path

    def set(self, key: str, value: str) -> None:
        previous = self._data.get(key)
        super().set(key, value)
        try:
            self._flush()
        except OSError:
            self._restore(key, previous)
            raise

    def remove(self, key: str) -> None:
        if key not in self._data:
            return
        previous = self._data[key]
        super().remove(key)
        try:
            self._flush()
        except OSError:
            self._restore(key, previous)
            raise

    def _restore(self, key: str, previous: Optional[str]) -> None:
        # Memory must match what is on disk after a failed write
        if previous is None:
            self._data.pop(key, None)
        else:
            self._data[key] = previous
        logger.error(f"Could not write store file {self._path}, '{key}' rolled back")

    def _load(self) -> None:
        if not self._path.exists():
            return

        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Could not read store file {self._path}: {e}")
            return

        if not isinstance(data, dict):
            logger.error(f"Store file {self._path} does not contain an object, ignoring")
            return

        self._data = {str(k): str(v) for k, v in data.items()}
        logger.info(f"Loaded {len(self._data)} keys from {self._path}")

    def _flush(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self._path.with_suffix(self._path.suffix + ".tmp")
        tmp_path.write_text(json.dumps(self._data, ensure_ascii=False), encoding="utf-8")
        tmp_path.replace(self._path)
