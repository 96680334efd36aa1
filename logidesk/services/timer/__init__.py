"""Task timer service module"""
from .timer_manager import TIMER_STORAGE_KEY, TimerManager

__all__ = [
    "TIMER_STORAGE_KEY",
    "TimerManager",
]
