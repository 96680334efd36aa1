"""
Action Parser - decode structured action payloads embedded in assistant replies

The assistant is prompted to place one JSON object inside a ```json fenced block when it
suggests creating a task, client, carrier or invoice. This module finds that block and
validates it against the known payload schemas. It never raises to the caller: anything
that cannot be decoded is logged and treated as "no action".
"""
import json
import logging
import re
from typing import Any, Dict, Optional

from pydantic import TypeAdapter, ValidationError as PydanticValidationError

from logidesk.errors import ActionParseError
from logidesk.models.actions import AssistantAction

logger = logging.getLogger(__name__)

JSON_BLOCK_PATTERN = re.compile(r"```json\s*(\{[\s\S]*?\})\s*```")

_action_adapter: TypeAdapter = TypeAdapter(AssistantAction)


def extract_json_block(text: str) -> Optional[str]:
    """Return the first ```json {...}``` block body, or None"""
    match = JSON_BLOCK_PATTERN.search(text or "")
    if not match:
        return None
    return match.group(1)


def decode_action(raw: str) -> AssistantAction:
    """
    Decode one JSON object into a typed action.

    Raises:
        ActionParseError: invalid JSON, no 'action' field, unknown action or invalid payload
    """
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ActionParseError(f"Invalid JSON in action block: {e}") from e

    if not isinstance(data, dict) or "action" not in data:
        raise ActionParseError("JSON block has no 'action' field")

    try:
        return _action_adapter.validate_python(data)
    except PydanticValidationError as e:
        raise ActionParseError(f"Invalid '{data.get('action')}' payload: {e}") from e


def parse_action(text: str) -> Optional[AssistantAction]:
    """
    Look for an embedded action in an assistant reply.

    Args:
        text: Assistant reply text

    Returns:
        Typed action, or None if the reply carries no valid action
    """
    raw = extract_json_block(text)
    if raw is None:
        return None

    try:
        action = decode_action(raw)
    except ActionParseError as e:
        logger.warning(f"Error parsing JSON from AI response: {e}")
        return None

    logger.info(f"Found action in AI response: {action.action}")
    return action


def action_to_dict(action: Optional[AssistantAction]) -> Optional[Dict[str, Any]]:
    """Wire form ({"action": ..., "<entity>": {...}}) for API responses and message metadata"""
    if action is None:
        return None
    return action.model_dump(by_alias=True, mode="json")
