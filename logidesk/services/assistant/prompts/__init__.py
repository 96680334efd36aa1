"""Assistant prompts"""
from .system_prompts import FILE_ANALYSIS_INSTRUCTION, SYSTEM_PROMPTS, get_system_prompt
from .file_prompt import build_file_prompt, truncate_file_content, truncation_notice

__all__ = [
    "FILE_ANALYSIS_INSTRUCTION",
    "SYSTEM_PROMPTS",
    "get_system_prompt",
    "build_file_prompt",
    "truncate_file_content",
    "truncation_notice",
]
