"""Conversation service module"""
from .conversation_store import (
    CONVERSATIONS_STORAGE_KEY,
    CURRENT_CONVERSATION_STORAGE_KEY,
    GREETING_MESSAGE,
    ConversationStore,
)
from .export import ConversationExport, content_disposition, export_filename, format_transcript

__all__ = [
    "CONVERSATIONS_STORAGE_KEY",
    "CURRENT_CONVERSATION_STORAGE_KEY",
    "GREETING_MESSAGE",
    "ConversationStore",
    "ConversationExport",
    "content_disposition",
    "export_filename",
    "format_transcript",
]
