"""Uploaded file context for the active chat session"""
import logging
import uuid
from datetime import datetime
from typing import Callable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError as PydanticValidationError

from logidesk.errors import ValidationError
from logidesk.infra.storage import KeyValueStore
from logidesk.models.assistant import UploadedFileContext
from logidesk.services.persistence import persist_json
from logidesk.utils.datetime_helper import now_utc

from .prompts import truncate_file_content

logger = logging.getLogger(__name__)

FILE_METADATA_STORAGE_KEY = "assistantFiles"
FILE_CONTENT_KEY_PREFIX = "assistantFile:"


class UploadedFileMetadata(BaseModel):
    """Metadata entry for a persisted upload"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    type: str
    size: int  # characters received
    truncated: bool = False
    uploaded_at: datetime = Field(alias="uploadedAt")


_metadata_list_adapter = TypeAdapter(List[UploadedFileMetadata])


def file_content_key(file_id: str) -> str:
    return f"{FILE_CONTENT_KEY_PREFIX}{file_id}"


class UploadedFileStore:
    """
    Holds the file attached to the current chat session.

    Content is persisted truncated to max_content_chars, one key per upload, with a
    metadata list alongside. The session's current file lives in memory only.
    """

    def __init__(
        self,
        store: KeyValueStore,
        max_content_chars: int,
        clock: Callable[[], datetime] = now_utc,
    ):
        self._store = store
        self._max_content_chars = max_content_chars
        self._clock = clock
        self._current: Optional[UploadedFileContext] = None
        self.last_notice: Optional[str] = None

    @property
    def current(self) -> Optional[UploadedFileContext]:
        return self._current

    def attach(self, name: str, type: str, content: str) -> UploadedFileMetadata:
        """Attach a file to the session and persist its (truncated) content"""
        if not name.strip():
            raise ValidationError("File name is required")
        if not content:
            raise ValidationError(f"File '{name}' is empty")

        stored_content = truncate_file_content(content, self._max_content_chars)
        metadata = UploadedFileMetadata(
            id=uuid.uuid4().hex,
            name=name,
            type=type or "application/octet-stream",
            size=len(content),
            truncated=len(content) > self._max_content_chars,
            uploaded_at=self._clock(),
        )

        self._current = UploadedFileContext(name=metadata.name, type=metadata.type, content=content)

        notice = persist_json(self._store, file_content_key(metadata.id), stored_content)
        if notice is None:
            files = self.list_files()
            files.append(metadata)
            notice = persist_json(
                self._store,
                FILE_METADATA_STORAGE_KEY,
                _metadata_list_adapter.dump_python(files, by_alias=True, mode="json"),
            )
        self.last_notice = notice

        logger.info(f"File attached: {metadata.name} ({metadata.size} chars, truncated={metadata.truncated})")
        return metadata

    def clear(self) -> None:
        if self._current is not None:
            logger.info(f"File context cleared: {self._current.name}")
        self._current = None

    def list_files(self) -> List[UploadedFileMetadata]:
        data = self._store.get_json(FILE_METADATA_STORAGE_KEY)
        if data is None:
            return []

        try:
            return _metadata_list_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.error(f"Error parsing file metadata from store: {e}")
            return []

    def load_content(self, file_id: str) -> Optional[str]:
        """Stored (possibly truncated) content of a previous upload"""
        content = self._store.get_json(file_content_key(file_id))
        return content if isinstance(content, str) else None
