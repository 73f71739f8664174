"""Normalization of variadic verb arguments into a fixed positional shape.

Transport verbs are called with trailing optional arguments that callers
may omit entirely::

    transport.get("/api")                         # no query, no headers
    transport.get("/api", {"page": 2})            # query only
    transport.post("/api", body, None, {"X": "1"})

:func:`pad_params` fills the omitted trailing positions with ``None`` and
:func:`normalize_params` maps either arity onto the canonical
:class:`~restnest.models.RequestParams`. An explicitly passed ``{}`` is kept
as-is, so "no query" and "empty query" stay distinguishable downstream.
"""

from __future__ import annotations

from typing import Any

from restnest.exceptions import InvalidUsageError
from restnest.models import HTTPMethod, RequestDescriptor, RequestParams

PARAMS_LENGTH_WITH_BODY = 4
"""Arity of a body-carrying verb call: ``(path, body, query, headers)``."""


def pad_params(args: tuple[Any, ...], length: int) -> tuple[Any, ...]:
    """Pad *args* with ``None`` up to *length* positions.

    Raises:
        InvalidUsageError: If more than *length* arguments were supplied.
    """
    if len(args) > length:
        raise InvalidUsageError(
            f"Expected at most {length} arguments, got {len(args)}"
        )
    return tuple(args) + (None,) * (length - len(args))


def normalize_params(*args: Any) -> RequestParams:
    """Map a padded argument list onto :class:`~restnest.models.RequestParams`.

    Accepts both arities: ``(path, query, headers)`` for verbs without a
    body and ``(path, body, query, headers)`` for verbs with one.

    Raises:
        InvalidUsageError: If the argument count matches neither arity or
            the path is not a string.
    """
    if len(args) == PARAMS_LENGTH_WITH_BODY:
        path, body, query, headers = args
    elif len(args) == PARAMS_LENGTH_WITH_BODY - 1:
        path, query, headers = args
        body = None
    else:
        raise InvalidUsageError(
            f"Expected {PARAMS_LENGTH_WITH_BODY - 1} or {PARAMS_LENGTH_WITH_BODY} "
            f"arguments, got {len(args)}"
        )

    if not isinstance(path, str):
        raise InvalidUsageError(f"Request path must be a string, got {type(path).__name__}")

    return RequestParams(path=path, body=body, query=query, headers=headers)


def params_length(method: HTTPMethod) -> int:
    """Return the full positional arity of a transport call for *method*."""
    return PARAMS_LENGTH_WITH_BODY if method.has_body else PARAMS_LENGTH_WITH_BODY - 1


def build_request(method: HTTPMethod, path: str, *args: Any) -> RequestDescriptor:
    """Build a :class:`~restnest.models.RequestDescriptor` for one call.

    Args:
        method: The HTTP verb.
        path: The composed request path.
        *args: ``body, query, headers`` for POST / PUT, ``query, headers``
            otherwise. Trailing arguments may be omitted.

    Example::

        build_request(HTTPMethod.GET, "/api")
        # RequestDescriptor(method=GET, path="/api", body=None, query=None, headers=None)
    """
    padded = pad_params((path, *args), params_length(method))
    params = normalize_params(*padded)
    return RequestDescriptor(
        method=method,
        path=params.path,
        body=params.body,
        query=params.query,
        headers=params.headers,
    )


def describe(descriptor: RequestDescriptor) -> str:
    """Return a one-line summary of *descriptor* for log messages."""
    parts = [f"{descriptor.method.value.upper()} {descriptor.path}"]
    if descriptor.query is not None:
        parts.append(f"query={descriptor.query!r}")
    if descriptor.headers is not None:
        parts.append(f"headers={sorted(descriptor.headers)!r}")
    if descriptor.body is not None:
        parts.append("with body")
    return " ".join(parts)
