"""Assistant function router - turns a chat turn into an LLM message list"""
from typing import Dict, Iterable, List, Optional, Union

from logidesk.models.assistant import AssistantFunctionType, HistoryMessage, UploadedFileContext
from logidesk.models.conversation import Message

from .prompts import build_file_prompt, get_system_prompt

DEFAULT_HISTORY_WINDOW = 10


def format_history(
    history: Iterable[Union[Message, HistoryMessage]],
    window: int = DEFAULT_HISTORY_WINDOW,
) -> List[Dict[str, str]]:
    """Map the trailing window of prior turns to chat roles"""
    turns = list(history)
    if window <= 0:
        return []

    return [
        {
            "role": "user" if _sender_value(turn) == "user" else "assistant",
            "content": turn.content,
        }
        for turn in turns[-window:]
    ]


def build_assistant_messages(
    message: str,
    function_type: AssistantFunctionType,
    history: Iterable[Union[Message, HistoryMessage]] = (),
    file: Optional[UploadedFileContext] = None,
    max_content_chars: int = 100_000,
    history_window: int = DEFAULT_HISTORY_WINDOW,
) -> List[Dict[str, str]]:
    """
    Build [system, ...history, user] for the chat-completion call.

    Args:
        message: Live user input (may be empty when replaying history)
        function_type: Selected assistant mode
        history: Prior turns, oldest first
        file: Uploaded file to analyze, if any
        max_content_chars: Truncation limit for file content
        history_window: Number of trailing prior turns to include

    Returns:
        Ordered message dicts with 'role' and 'content'
    """
    has_file = file is not None and bool(file.content)
    system_prompt = get_system_prompt(function_type, with_file=has_file)

    if has_file:
        user_prompt = build_file_prompt(file, message, max_content_chars)
    else:
        user_prompt = message

    messages = [{"role": "system", "content": system_prompt}]
    messages.extend(format_history(history, history_window))

    # Empty input means a pure history replay
    if user_prompt.strip():
        messages.append({"role": "user", "content": user_prompt})

    return messages


def _sender_value(turn: Union[Message, HistoryMessage]) -> str:
    sender = turn.sender
    return sender.value if hasattr(sender, "value") else sender
