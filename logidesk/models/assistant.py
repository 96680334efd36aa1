"""Assistant request/response models"""
from enum import Enum
from typing import Any, Dict, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class AssistantFunctionType(str, Enum):
    """Assistant mode selecting the system prompt template"""
    GENERAL_CHAT = "general_chat"
    TASK_MANAGEMENT = "task_management"
    EMAIL_ANALYSIS = "email_analysis"
    DATA_PROCESSING = "data_processing"
    WEB_RESEARCH = "web_research"
    DOCUMENT_GENERATION = "document_generation"
    NEWS_AGGREGATION = "news_aggregation"
    PERSONAL_INFO = "personal_info"
    DECISION_SUPPORT = "decision_support"

    @classmethod
    def resolve(cls, value: Optional[str]) -> "AssistantFunctionType":
        """Map a raw tag to a function type; unknown or missing tags fall back to general chat"""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            return cls.GENERAL_CHAT


class UploadedFileContext(BaseModel):
    """File attached to the active chat session"""
    name: str
    type: str  # mime type
    content: str


class HistoryMessage(BaseModel):
    """Prior turn forwarded as context"""
    sender: str  # "user"; anything else is replayed as the assistant
    content: str


class AssistantProxyRequest(BaseModel):
    """Request body of the ai-assistant endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    message: str = ""
    file_content: Optional[str] = Field(None, alias="fileContent")
    file_name: Optional[str] = Field(None, alias="fileName")
    file_type: Optional[str] = Field(None, alias="fileType")
    function_type: Optional[str] = Field(None, alias="functionType")
    conversation_history: List[HistoryMessage] = Field(default_factory=list, alias="conversationHistory")


class AssistantProxyResponse(BaseModel):
    """Response body of the ai-assistant endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    response: Optional[str] = None
    function_type: Optional[AssistantFunctionType] = Field(None, alias="functionType")
    action_data: Optional[Dict[str, Any]] = Field(None, alias="actionData")
    error: Optional[str] = None


class FileAnalysisRequest(BaseModel):
    """Request body of the analyze-file endpoint"""
    model_config = ConfigDict(populate_by_name=True)

    file_name: str = Field(alias="fileName")
    file_type: str = Field(alias="fileType")
    file_content: Optional[str] = Field(None, alias="fileContent")
    analysis_type: Literal["chat", "comprehensive"] = Field("comprehensive", alias="analysisType")
    question: Optional[str] = None


class FileAnalysisResponse(BaseModel):
    """Response body of the analyze-file endpoint"""
    success: bool
    analysis: Optional[str] = None
    error: Optional[str] = None
