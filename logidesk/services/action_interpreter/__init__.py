"""Action interpreter module"""
from .action_parser import action_to_dict, decode_action, extract_json_block, parse_action

__all__ = [
    "action_to_dict",
    "decode_action",
    "extract_json_block",
    "parse_action",
]
