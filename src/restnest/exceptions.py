"""Exception hierarchy for restnest.

All exceptions inherit from :class:`RestnestError`. The resource node engine
itself only ever raises :class:`InvalidUsageError`, and it does so
synchronously before any I/O. Everything else comes from a transport and
is propagated to the caller unchanged.

Subclass hierarchy::

    RestnestError
    +-- InvalidUsageError       (bad call-site arguments, raised before I/O)
    +-- ConfigError             (invalid configuration values or files)
    +-- TransportError          (raised by the bundled transports)
        +-- HTTPStatusError     (any HTTP status >= 400)
        |   +-- AuthError       (401 / 403)
        |   +-- NotFoundError   (404)
        |   +-- ClientError     (other 4xx)
        |   +-- ServerError     (5xx)
        +-- ConnectionError_    (timeout, DNS failure, connection refused)
"""

from __future__ import annotations

from typing import Any


class RestnestError(Exception):
    """Base exception for all restnest errors.

    Args:
        message: Human-readable error description.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidUsageError(RestnestError):
    """Raised for invalid call-site arguments, e.g. ``for_()`` without identifiers."""


class ConfigError(RestnestError):
    """Raised for configuration problems (invalid JSON, bad values)."""


class TransportError(RestnestError):
    """Base class for errors raised by the bundled transports."""


class HTTPStatusError(TransportError):
    """Raised when the API answers with an HTTP status >= 400.

    Args:
        message: Human-readable error description.
        status_code: The HTTP status code of the response.
        payload: The decoded response body, if any.
    """

    def __init__(self, message: str, status_code: int, payload: Any = None):
        super().__init__(message)
        self.status_code = status_code
        self.payload = payload


class AuthError(HTTPStatusError):
    """Raised when the API rejects the request with HTTP 401 or 403."""


class NotFoundError(HTTPStatusError):
    """Raised when the API returns HTTP 404 (resource not found)."""


class ClientError(HTTPStatusError):
    """Raised for 4xx responses other than 401, 403 and 404."""


class ServerError(HTTPStatusError):
    """Raised when the API returns an HTTP 5xx server error."""


class ConnectionError_(TransportError):
    """Raised on network-level failures (timeout, DNS resolution, connection refused).

    Named with a trailing underscore to avoid shadowing the built-in
    ``ConnectionError``.
    """
