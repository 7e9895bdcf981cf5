"""Text shaping for tool responses."""

import json
from typing import Any, Optional


def format_json(payload: Any, heading: Optional[str] = None) -> str:
    """
    Pretty-print a Clockify response for a text content block.

    Args:
        payload: Decoded JSON returned by Clockify
        heading: Optional first line, e.g. "Project created"
    """
    body = json.dumps(payload, indent=2, ensure_ascii=False)
    if heading:
        return f"{heading}:\n{body}"
    return body


def deleted_message(kind: str, entity_id: str) -> str:
    return f"{kind} {entity_id} deleted successfully"
