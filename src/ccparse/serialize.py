"""Serialization - Export a CommitMessage to JSON.

Two field naming styles are supported:

- ``pascal``: ``Header``/``Type``/``Footers``/``Token`` ... (default,
  exported-struct style)
- ``snake``: ``header``/``type``/``footers``/``token`` ...
"""

from __future__ import annotations

import json
from typing import Any

from ccparse.core.models import CommitMessage, Footer, Header

FIELD_CASES = ("pascal", "snake")


def _key(name: str, field_case: str) -> str:
    if field_case == "pascal":
        return name.capitalize()
    if field_case == "snake":
        return name
    raise ValueError(f"Unknown field case: {field_case!r} (expected one of {FIELD_CASES})")


def serialize_header(header: Header, field_case: str = "pascal") -> dict[str, Any]:
    """Serialize a Header to a JSON-compatible dict."""
    return {
        _key("type", field_case): header.type,
        _key("scope", field_case): header.scope,
        _key("breaking", field_case): header.breaking,
        _key("message", field_case): header.message,
    }


def serialize_footer(footer: Footer, field_case: str = "pascal") -> dict[str, Any]:
    """Serialize a Footer to a JSON-compatible dict."""
    return {
        _key("token", field_case): footer.token,
        _key("value", field_case): footer.value,
        _key("separator", field_case): footer.separator,
    }


def serialize_message(message: CommitMessage, field_case: str = "pascal") -> dict[str, Any]:
    """Serialize a CommitMessage to a JSON-compatible dict.

    Args:
        message: The parsed message.
        field_case: "pascal" or "snake".

    Returns:
        Dict suitable for JSON serialization. ``footers`` is always a
        list, empty when the message has none.
    """
    return {
        _key("header", field_case): serialize_header(message.header, field_case),
        _key("body", field_case): message.body,
        _key("footers", field_case): [serialize_footer(f, field_case) for f in message.footers],
    }


def to_json(message: CommitMessage, field_case: str = "pascal", indent: int = 0) -> str:
    """Render a CommitMessage as a JSON string.

    An indent of 0 produces compact single-line output.
    """
    data = serialize_message(message, field_case)
    if indent:
        return json.dumps(data, indent=indent, ensure_ascii=False)
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)
