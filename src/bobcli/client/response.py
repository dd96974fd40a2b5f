"""Response decoding and error-message extraction for HiBob API calls.

HiBob does not use one error envelope everywhere. :func:`extract_error_message`
knows the shapes seen in practice (``message``, ``error``, ``error.message``,
``errors``) and :func:`parse_response_body` decodes a body according to its
content type, treating non-JSON bodies as plain text.
"""

from __future__ import annotations

from typing import Any, Optional

import httpx


def parse_response_body(response: httpx.Response) -> Any:
    """Decode the body of *response*.

    Returns:
        ``None`` for 204 responses and empty text bodies, the decoded JSON
        when the content type mentions ``application/json``, and the raw
        text otherwise, including for JSON-labelled bodies that fail to parse.
    """
    if response.status_code == 204:
        return None
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            return response.json()
        except ValueError:
            pass
    return response.text or None


def extract_error_message(body: Any) -> Optional[str]:
    """Pull a human-readable message out of an error body, or return ``None``."""
    if not isinstance(body, dict):
        return None
    message = body.get("message")
    if isinstance(message, str):
        return message
    error = body.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    errors = body.get("errors")
    if isinstance(errors, list):
        for entry in errors:
            if isinstance(entry, str):
                return entry
    return None


def describe_failure(response: httpx.Response, body: Any) -> str:
    """Message for a failed response: the upstream message or ``"<status> <reason>"``."""
    return extract_error_message(body) or f"{response.status_code} {response.reason_phrase}"
