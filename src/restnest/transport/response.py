"""Response decoding -- maps an :class:`httpx.Response` to a payload.

After an HTTP call completes, :func:`extract_response_data` turns the body
into the payload handed back to the resource node, and
:func:`error_message` builds the text of the exception raised for an
error status.
"""

from __future__ import annotations

from typing import Any

import httpx


def extract_response_data(response: httpx.Response) -> Any:
    """Extract the body from an HTTP response.

    Attempts to parse the body as JSON first. If that fails (e.g. the
    response is HTML or plain text), returns the raw text. Returns
    ``None`` for responses with no content (e.g. ``204 No Content``).

    Args:
        response: The :class:`httpx.Response` to extract data from.

    Returns:
        A JSON-decoded object (``dict``, ``list``, etc.), a ``str`` of raw
        text, or ``None`` if the body is empty.
    """
    if not response.content:
        return None

    try:
        return response.json()
    except ValueError:
        return response.text


def error_message(response: httpx.Response, payload: Any) -> str:
    """Build ``"HTTP <status>: <detail>"`` for an error response.

    The detail is taken from the usual ``message`` / ``error`` / ``detail``
    keys of a JSON object body, or from the first 200 characters of a
    text body.
    """
    if isinstance(payload, dict):
        msg = payload.get("message") or payload.get("error") or payload.get("detail") or ""
    elif isinstance(payload, str):
        msg = payload[:200]
    elif payload is None:
        msg = ""
    else:
        msg = str(payload)

    prefix = f"HTTP {response.status_code}"
    return f"{prefix}: {msg}" if msg else prefix
