"""Prompts for the analyze-file service"""
from typing import Optional

from logidesk.services.assistant.prompts import truncate_file_content


ANALYST_SYSTEM_PROMPT = (
    "You are a customs and logistics data analyst expert. "
    "Provide detailed analysis of import/export data."
)


COMPREHENSIVE_ANALYSIS_PROMPT = """Analyze this customs data file named "{file_name}" ({file_type} format).

Please provide:
1. General overview of the imports/exports
2. Top 20 goods by weight
3. Top 20 companies for each of these goods
4. Key insights and trends
5. Recommendations for duty optimization

Format your response in markdown.
"""


CHAT_ANALYSIS_PROMPT = """The user is working with the data file "{file_name}" ({file_type} format).

The user asks: {question}

Answer based on the file data. Format your response in markdown.
"""


def build_analysis_prompt(
    file_name: str,
    file_type: str,
    analysis_type: str,
    question: Optional[str],
    file_content: Optional[str],
    max_content_chars: int,
) -> str:
    """
    Build the user prompt for a file analysis request.

    Args:
        file_name: Original file name
        file_type: File format (csv, excel, mime type...)
        analysis_type: "chat" or "comprehensive"
        question: User question (chat mode)
        file_content: Optional file text, truncated to max_content_chars
        max_content_chars: Truncation limit

    Returns:
        Prompt string
    """
    if analysis_type == "chat":
        prompt = CHAT_ANALYSIS_PROMPT.format(file_name=file_name, file_type=file_type, question=question)
    else:
        prompt = COMPREHENSIVE_ANALYSIS_PROMPT.format(file_name=file_name, file_type=file_type)

    if file_content:
        processed = truncate_file_content(file_content, max_content_chars)
        prompt += f"\nFile content:\n\n{processed}\n"

    return prompt
