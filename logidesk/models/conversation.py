"""Conversation domain models"""
from datetime import datetime
from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from .assistant import AssistantFunctionType


class Sender(str, Enum):
    """Message sender"""
    USER = "user"
    AI = "ai"


class Message(BaseModel):
    """Single chat turn"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    sender: Sender
    content: str
    timestamp: datetime
    function_type: Optional[AssistantFunctionType] = Field(None, alias="functionType")
    action_data: Optional[Dict[str, Any]] = Field(None, alias="actionData")


class Conversation(BaseModel):
    """Ordered sequence of messages with a title"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    last_message: str = Field("", alias="lastMessage")
    updated_at: datetime = Field(alias="updatedAt")
    messages: List[Message] = Field(default_factory=list)


class ConversationSummary(BaseModel):
    """Conversation list entry (without messages)"""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    last_message: str = Field("", alias="lastMessage")
    updated_at: datetime = Field(alias="updatedAt")
    message_count: int = Field(0, alias="messageCount")
