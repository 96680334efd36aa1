from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import PlainTextResponse
from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional
import logging

from logidesk.container import ServiceContainer
from logidesk.errors import ProviderError, ValidationError
from logidesk.models.conversation import ConversationSummary, Message
from logidesk.services.assistant import AssistantReply
from logidesk.services.conversation import content_disposition

from .deps import get_container

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/conversations", tags=["conversations"])


class ConversationListResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversations: List[ConversationSummary]
    current_id: Optional[str] = Field(None, alias="currentId")


class CurrentMessagesResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    conversation_id: Optional[str] = Field(None, alias="conversationId")
    messages: List[Message]


class SendMessageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    message: str = ""
    function_type: Optional[str] = Field(None, alias="functionType")
    conversation_id: Optional[str] = Field(None, alias="conversationId")


@router.get("", response_model=ConversationListResponse, response_model_by_alias=True)
async def list_conversations(container: ServiceContainer = Depends(get_container)):
    """Conversations, newest first, with the current pointer"""
    store = container.conversations
    return {"conversations": store.list_conversations(), "currentId": store.current_id}


@router.get("/current/messages", response_model=CurrentMessagesResponse, response_model_by_alias=True)
async def get_current_messages(container: ServiceContainer = Depends(get_container)):
    """Messages of the current conversation, or the greeting when none is selected"""
    store = container.conversations
    return {"conversationId": store.current_id, "messages": store.current_messages()}


@router.post("/current/messages", response_model=AssistantReply, response_model_by_alias=True)
async def send_message(request: SendMessageRequest, container: ServiceContainer = Depends(get_container)):
    """Send a chat message and store the assistant's reply"""
    try:
        return await container.assistant.send_message(
            request.message,
            function_type=request.function_type,
            conversation_id=request.conversation_id,
        )
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except ProviderError as e:
        raise HTTPException(status_code=502, detail=e.message)


@router.post("/new")
async def new_chat(container: ServiceContainer = Depends(get_container)):
    """Start a fresh chat session"""
    container.assistant.new_chat()
    return {"success": True}


@router.post("/{conversation_id}/select")
async def select_conversation(conversation_id: str, container: ServiceContainer = Depends(get_container)):
    """Make a conversation current. Unknown ids leave the pointer unchanged."""
    selected = container.conversations.select_conversation(conversation_id)
    return {"selected": selected, "currentId": container.conversations.current_id}


@router.delete("/{conversation_id}")
async def delete_conversation(conversation_id: str, container: ServiceContainer = Depends(get_container)):
    if not container.conversations.delete_conversation(conversation_id):
        raise HTTPException(status_code=404, detail="Conversation not found")
    return {"success": True, "currentId": container.conversations.current_id}


@router.get("/{conversation_id}/export", response_class=PlainTextResponse)
async def export_conversation(conversation_id: str, container: ServiceContainer = Depends(get_container)):
    """Plain-text transcript as a downloadable attachment"""
    try:
        export = container.conversations.export_conversation(conversation_id, container.display_tz)
    except KeyError:
        raise HTTPException(status_code=404, detail="Conversation not found")

    logger.info(f"Exporting conversation {conversation_id} as {export.filename}")
    return PlainTextResponse(
        content=export.content,
        headers={"Content-Disposition": content_disposition(export.filename)},
    )
