"""File analysis service - customs data analysis and Q&A over uploaded files"""
import logging

from logidesk.errors import ValidationError
from logidesk.models.assistant import FileAnalysisRequest
from logidesk.services.llm import LLMService

from .prompts import ANALYST_SYSTEM_PROMPT, build_analysis_prompt

logger = logging.getLogger(__name__)


async def analyze_file(
    request: FileAnalysisRequest,
    llm_service: LLMService,
    max_content_chars: int,
) -> str:
    """
    Run one analysis call for a file.

    Args:
        request: analyze-file request body
        llm_service: LLM used for analysis
        max_content_chars: Truncation limit for file content

    Returns:
        Markdown analysis text

    Raises:
        ValidationError: chat request without a question, or a request without a file name
        ProviderError: provider call failed
    """
    if not request.file_name.strip():
        raise ValidationError("fileName is required")

    if request.analysis_type == "chat" and not (request.question or "").strip():
        raise ValidationError("question is required for chat analysis")

    logger.info(
        f"Analyzing file: {request.file_name}, type: {request.file_type}, "
        f"analysis: {request.analysis_type}"
    )

    prompt = build_analysis_prompt(
        file_name=request.file_name,
        file_type=request.file_type,
        analysis_type=request.analysis_type,
        question=request.question,
        file_content=request.file_content,
        max_content_chars=max_content_chars,
    )

    messages = [
        {"role": "system", "content": ANALYST_SYSTEM_PROMPT},
        {"role": "user", "content": prompt},
    ]

    return await llm_service.invoke(messages)
