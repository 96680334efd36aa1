# API module exports
from logidesk.api import analyze_file, assistant, conversations, health, tasks, timer
from logidesk.api.base import api_router

__all__ = ["analyze_file", "assistant", "conversations", "health", "tasks", "timer", "api_router"]
