"""Task list service module"""
from .task_service import INITIAL_TASKS, TASKS_STORAGE_KEY, TaskService

__all__ = [
    "INITIAL_TASKS",
    "TASKS_STORAGE_KEY",
    "TaskService",
]
