"""Assistant service - one chat turn from user input to persisted assistant reply"""
import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from logidesk.errors import ProviderError, ValidationError
from logidesk.models.assistant import (
    AssistantFunctionType,
    AssistantProxyRequest,
    AssistantProxyResponse,
    UploadedFileContext,
)
from logidesk.models.conversation import Message, Sender
from logidesk.services.action_interpreter import action_to_dict, parse_action
from logidesk.services.conversation import ConversationStore
from logidesk.services.llm import ChatCompletionClient

from .file_context import UploadedFileStore
from .function_router import DEFAULT_HISTORY_WINDOW, build_assistant_messages

logger = logging.getLogger(__name__)


class AssistantReply(BaseModel):
    """Result of a stateful chat turn"""
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: str = Field(alias="conversationId")
    message: Message
    action_data: Optional[Dict[str, Any]] = Field(None, alias="actionData")
    notice: Optional[str] = None


async def run_assistant(
    request: AssistantProxyRequest,
    client: ChatCompletionClient,
    max_content_chars: int,
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> AssistantProxyResponse:
    """
    Stateless ai-assistant call: route, call the provider, interpret the reply.

    Raises:
        ValidationError: nothing to send (no message, no file, no history)
        ProviderError: provider call failed
    """
    function_type = AssistantFunctionType.resolve(request.function_type)

    file = None
    if request.file_content and request.file_type:
        file = UploadedFileContext(
            name=request.file_name or "uploaded file",
            type=request.file_type,
            content=request.file_content,
        )

    if not request.message.strip() and file is None and not request.conversation_history:
        raise ValidationError("Message is empty")

    logger.info(f"Processing {function_type.value} request with file: {'Yes' if file else 'No'}")

    messages = build_assistant_messages(
        message=request.message,
        function_type=function_type,
        history=request.conversation_history,
        file=file,
        max_content_chars=max_content_chars,
        history_window=history_window,
    )

    reply = await client.complete(messages)
    action = parse_action(reply)

    return AssistantProxyResponse(
        success=True,
        response=reply,
        function_type=function_type,
        action_data=action_to_dict(action),
    )


class AssistantService:
    """Stateful chat: conversation persistence around the assistant call"""

    def __init__(
        self,
        conversations: ConversationStore,
        files: UploadedFileStore,
        client: ChatCompletionClient,
        max_content_chars: int,
        history_window: int = DEFAULT_HISTORY_WINDOW,
    ):
        self._conversations = conversations
        self._files = files
        self._client = client
        self._max_content_chars = max_content_chars
        self._history_window = history_window

    async def send_message(
        self,
        text: str,
        function_type: Optional[str] = None,
        conversation_id: Optional[str] = None,
    ) -> AssistantReply:
        """
        Append the user's message, ask the assistant, append its reply.

        On ProviderError the user's message stays committed and no assistant reply is
        appended; the error propagates to the caller.
        """
        resolved_type = AssistantFunctionType.resolve(function_type)
        file = self._files.current

        if not text.strip() and file is None:
            raise ValidationError("Message is empty")

        question = text if text.strip() else f"Analyze {file.name}"

        target_id = conversation_id or self._conversations.current_id
        history = self._conversations.recent_messages(target_id, self._history_window) if target_id else []

        user_message = self._conversations.create_message(Sender.USER, question, resolved_type)
        conversation = self._conversations.append_message(conversation_id, user_message)

        messages = build_assistant_messages(
            message=question,
            function_type=resolved_type,
            history=history,
            file=file,
            max_content_chars=self._max_content_chars,
            history_window=self._history_window,
        )

        try:
            reply = await self._client.complete(messages)
        except ProviderError as e:
            logger.error(f"Assistant call failed for conversation {conversation.id}: {e.message}")
            raise

        action_data = action_to_dict(parse_action(reply))
        ai_message = self._conversations.create_message(Sender.AI, reply, resolved_type, action_data)
        self._conversations.append_message(conversation.id, ai_message)

        return AssistantReply(
            conversation_id=conversation.id,
            message=ai_message,
            action_data=action_data,
            notice=self._conversations.last_notice,
        )

    def new_chat(self) -> None:
        """Start a fresh session: clear the pointer and the uploaded file"""
        self._conversations.new_chat()
        self._files.clear()
