"""User prompt wrapping an uploaded file"""
from logidesk.models.assistant import UploadedFileContext


def truncation_notice(limit: int) -> str:
    return (
        "\n\n[File content truncated due to size limitations. "
        f"This is the first {limit:,} characters.]"
    )


def truncate_file_content(content: str, max_content_chars: int) -> str:
    """
    Keep the first max_content_chars characters and append a visible notice.

    Content within the limit is returned unchanged.
    """
    if max_content_chars <= 0:
        raise ValueError("max_content_chars must be positive")

    if len(content) <= max_content_chars:
        return content

    return content[:max_content_chars] + truncation_notice(max_content_chars)


def build_file_prompt(file: UploadedFileContext, question: str, max_content_chars: int) -> str:
    """Composite prompt: file metadata, (possibly truncated) content, then the user's question"""
    processed_content = truncate_file_content(file.content, max_content_chars)

    return (
        f'The user uploaded a {file.type} file named "{file.name}" with the following content:\n\n'
        f"{processed_content}\n\n"
        f"The user asks: {question}\n\n"
        "Provide a thorough analysis based on the file content."
    )
