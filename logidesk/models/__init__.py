"""Domain models for the application"""
from .task import Task, TaskCreate, TaskStatus
from .timer import TimerState, TimerStatus, TimerView
from .assistant import (
    AssistantFunctionType,
    AssistantProxyRequest,
    AssistantProxyResponse,
    FileAnalysisRequest,
    FileAnalysisResponse,
    HistoryMessage,
    UploadedFileContext,
)
from .conversation import Conversation, ConversationSummary, Message, Sender
from .actions import (
    AssistantAction,
    CarrierPayload,
    ClientPayload,
    CreateCarrierAction,
    CreateClientAction,
    CreateInvoiceAction,
    CreateTaskAction,
    InvoiceItem,
    InvoicePayload,
    TaskPayload,
)

__all__ = [
    'Task', 'TaskCreate', 'TaskStatus',
    'TimerState', 'TimerStatus', 'TimerView',
    'AssistantFunctionType', 'AssistantProxyRequest', 'AssistantProxyResponse',
    'FileAnalysisRequest', 'FileAnalysisResponse', 'HistoryMessage', 'UploadedFileContext',
    'Conversation', 'ConversationSummary', 'Message', 'Sender',
    'AssistantAction', 'CreateTaskAction', 'CreateClientAction', 'CreateCarrierAction',
    'CreateInvoiceAction', 'TaskPayload', 'ClientPayload', 'CarrierPayload',
    'InvoicePayload', 'InvoiceItem',
]
