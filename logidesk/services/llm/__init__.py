"""LLM clients"""
from .call_llm import LLMService
from .chat_completion import ChatCompletionClient

__all__ = [
    "LLMService",
    "ChatCompletionClient",
]
