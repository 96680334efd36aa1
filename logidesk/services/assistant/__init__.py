"""Assistant service module"""
from .assistant_service import AssistantReply, AssistantService, run_assistant
from .file_context import UploadedFileMetadata, UploadedFileStore
from .function_router import build_assistant_messages, format_history

__all__ = [
    "AssistantReply",
    "AssistantService",
    "run_assistant",
    "UploadedFileMetadata",
    "UploadedFileStore",
    "build_assistant_messages",
    "format_history",
]
