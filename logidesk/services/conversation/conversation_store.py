"""Conversation Store - persisted chat sessions with a current-conversation pointer"""
import logging
import re
import uuid
from datetime import datetime, tzinfo
from typing import Any, Callable, Dict, List, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from logidesk.infra.storage import KeyValueStore
from logidesk.models.assistant import AssistantFunctionType
from logidesk.models.conversation import Conversation, ConversationSummary, Message, Sender
from logidesk.services.persistence import persist_json
from logidesk.utils.datetime_helper import now_utc

from .export import ConversationExport, export_filename, format_transcript

logger = logging.getLogger(__name__)

CONVERSATIONS_STORAGE_KEY = "assistantConversations"
CURRENT_CONVERSATION_STORAGE_KEY = "assistantCurrentConversationId"

GREETING_MESSAGE = (
    "Привіт! Я ваш AI асистент для логістики. Я можу допомогти вам з аналізом даних, "
    "управлінням задачами, обробкою електронної пошти та багато іншого. "
    "Як я можу допомогти вам сьогодні?"
)

_DEFAULT_TITLE_PATTERN = re.compile(r"^Conversation (\d+)$")

_conversation_list_adapter = TypeAdapter(List[Conversation])


class ConversationStore:
    """
    Ordered collection of conversations (newest first) plus the pointer selecting
    which conversation receives new messages. Both are written on every mutation.
    """

    def __init__(self, store: KeyValueStore, clock: Callable[[], datetime] = now_utc):
        self._store = store
        self._clock = clock
        self.last_notice: Optional[str] = None
        self._conversations: List[Conversation] = self._load_conversations()
        self._current_id: Optional[str] = self._load_current_id()

    @property
    def current_id(self) -> Optional[str]:
        return self._current_id

    @property
    def current(self) -> Optional[Conversation]:
        if self._current_id is None:
            return None
        return self.get_conversation(self._current_id)

    def list_conversations(self) -> List[ConversationSummary]:
        return [
            ConversationSummary(
                id=c.id,
                title=c.title,
                last_message=c.last_message,
                updated_at=c.updated_at,
                message_count=len(c.messages),
            )
            for c in self._conversations
        ]

    def get_conversation(self, conversation_id: str) -> Optional[Conversation]:
        for conversation in self._conversations:
            if conversation.id == conversation_id:
                return conversation
        return None

    def create_message(
        self,
        sender: Sender,
        content: str,
        function_type: Optional[AssistantFunctionType] = None,
        action_data: Optional[Dict[str, Any]] = None,
    ) -> Message:
        """Build a message stamped with a fresh id and the current time"""
        return Message(
            id=uuid.uuid4().hex,
            sender=sender,
            content=content,
            timestamp=self._clock(),
            function_type=function_type,
            action_data=action_data,
        )

    def append_message(self, conversation_id: Optional[str], message: Message) -> Conversation:
        """
        Append a message to the given conversation, or to the current one.

        With no conversation to append to, a new conversation is created and made current.
        """
        target_id = conversation_id or self._current_id
        conversation = self.get_conversation(target_id) if target_id else None

        if target_id and conversation is None:
            logger.warning(f"Conversation {target_id} not found, starting a new one")

        if conversation is None:
            conversation = self._create_conversation()

        conversation.messages.append(message)
        conversation.last_message = message.content
        conversation.updated_at = message.timestamp
        self._current_id = conversation.id
        self._persist()

        return conversation

    def select_conversation(self, conversation_id: str) -> bool:
        """Point at an existing conversation. Unknown ids are ignored."""
        if self.get_conversation(conversation_id) is None:
            logger.debug(f"Ignoring select of unknown conversation {conversation_id}")
            return False

        self._current_id = conversation_id
        self._persist_current_id()
        return True

    def delete_conversation(self, conversation_id: str) -> bool:
        conversation = self.get_conversation(conversation_id)
        if conversation is None:
            return False

        self._conversations.remove(conversation)
        if self._current_id == conversation_id:
            self._current_id = None
        self._persist()

        logger.info(f"Conversation {conversation_id} deleted")
        return True

    def new_chat(self) -> None:
        """Clear the pointer; the next message starts a new conversation"""
        self._current_id = None
        self._persist_current_id()

    def current_messages(self) -> List[Message]:
        """Chat view: the current conversation's messages, or the greeting for a fresh session"""
        conversation = self.current
        if conversation is not None:
            return list(conversation.messages)

        return [
            Message(
                id="greeting",
                sender=Sender.AI,
                content=GREETING_MESSAGE,
                timestamp=self._clock(),
            )
        ]

    def recent_messages(self, conversation_id: str, limit: int) -> List[Message]:
        conversation = self.get_conversation(conversation_id)
        if conversation is None or limit <= 0:
            return []
        return conversation.messages[-limit:]

    def export_conversation(self, conversation_id: str, tz: tzinfo) -> ConversationExport:
        conversation = self.get_conversation(conversation_id)
        if conversation is None:
            raise KeyError(conversation_id)

        return ConversationExport(
            filename=export_filename(conversation.title),
            content=format_transcript(conversation.messages, tz),
        )

    def _create_conversation(self) -> Conversation:
        conversation = Conversation(
            id=uuid.uuid4().hex,
            title=f"Conversation {self._next_sequence()}",
            updated_at=self._clock(),
        )
        self._conversations.insert(0, conversation)
        logger.info(f"Conversation created: {conversation.id} - {conversation.title}")
        return conversation

    def _next_sequence(self) -> int:
        highest = 0
        for conversation in self._conversations:
            match = _DEFAULT_TITLE_PATTERN.match(conversation.title)
            if match:
                highest = max(highest, int(match.group(1)))
        return highest + 1

    def _load_conversations(self) -> List[Conversation]:
        data = self._store.get_json(CONVERSATIONS_STORAGE_KEY)
        if data is None:
            return []

        try:
            return _conversation_list_adapter.validate_python(data)
        except PydanticValidationError as e:
            logger.error(f"Error parsing conversations from store: {e}")
            return []

    def _load_current_id(self) -> Optional[str]:
        current_id = self._store.get_json(CURRENT_CONVERSATION_STORAGE_KEY)
        if not isinstance(current_id, str) or not current_id:
            return None

        if self.get_conversation(current_id) is None:
            logger.warning(f"Stored current conversation {current_id} no longer exists")
            return None

        return current_id

    def _persist(self) -> None:
        notice = persist_json(
            self._store,
            CONVERSATIONS_STORAGE_KEY,
            _conversation_list_adapter.dump_python(self._conversations, by_alias=True, mode="json"),
        )
        self._persist_current_id()
        self.last_notice = notice or self.last_notice

    def _persist_current_id(self) -> None:
        self.last_notice = persist_json(self._store, CURRENT_CONVERSATION_STORAGE_KEY, self._current_id or "")
