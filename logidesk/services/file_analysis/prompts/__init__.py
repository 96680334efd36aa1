"""File analysis prompts"""
from .analysis_prompt import (
    ANALYST_SYSTEM_PROMPT,
    CHAT_ANALYSIS_PROMPT,
    COMPREHENSIVE_ANALYSIS_PROMPT,
    build_analysis_prompt,
)

__all__ = [
    "ANALYST_SYSTEM_PROMPT",
    "CHAT_ANALYSIS_PROMPT",
    "COMPREHENSIVE_ANALYSIS_PROMPT",
    "build_analysis_prompt",
]
