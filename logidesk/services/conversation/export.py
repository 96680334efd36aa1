"""Plain-text transcript export"""
import re
from urllib.parse import quote
from datetime import tzinfo
from typing import Iterable

from pydantic import BaseModel

from logidesk.models.conversation import Message, Sender
from logidesk.utils.datetime_helper import format_timestamp

SENDER_LABELS = {
    Sender.USER: "You",
    Sender.AI: "AI Assistant",
}


class ConversationExport(BaseModel):
    """Downloadable transcript"""
    filename: str
    content: str


def format_transcript(messages: Iterable[Message], tz: tzinfo) -> str:
    """
    Flatten messages into "{Sender} ({timestamp}):\\n{content}\\n\\n" blocks in sequence order.
    Pure: the same messages and zone always give the same text.
    """
    return "".join(
        f"{SENDER_LABELS[message.sender]} ({format_timestamp(message.timestamp, tz)}):\n"
        f"{message.content}\n\n"
        for message in messages
    )


def export_filename(title: str) -> str:
    """File name derived from the conversation title"""
    safe = re.sub(r"[^\w\- ]+", "", title).strip()
    return f"{safe or 'conversation'}.txt"


def content_disposition(filename: str) -> str:
    """
    Attachment header value for a transcript download.

    Non-ASCII names get an ASCII fallback plus an RFC 5987 filename* parameter,
    since header values are sent as latin-1.
    """
    if filename.isascii():
        return f'attachment; filename="{filename}"'

    stem = filename[:-4] if filename.endswith(".txt") else filename
    fallback = re.sub(r"[^A-Za-z0-9_\- ]+", "", stem).strip() or "conversation"
    return f"attachment; filename=\"{fallback}.txt\"; filename*=UTF-8''{quote(filename)}"
