"""Canonical models shared across all restnest modules.

The models fall into two groups:

**Request models** -- transient values produced per call by the resource
node engine and consumed by transports:
    :class:`HTTPMethod`, :class:`NodeMode`, :class:`RequestParams` and
    :class:`RequestDescriptor`.

**Configuration models** -- Pydantic v2 models loaded by
:mod:`restnest.config` and consumed by
:class:`~restnest.transport.http.HttpTransport`:
    :class:`TransportConfig`.

Request models are frozen dataclasses so that two descriptors describing
the same call compare equal and nothing downstream can mutate them. An
absent optional value is always ``None``, which keeps "no query supplied"
distinct from "empty query supplied" (``{}``).
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


# --- Request models ---


class HTTPMethod(str, enum.Enum):
    """The four HTTP verbs a resource node can issue.

    The value doubles as the name of the transport method that performs
    the verb (``transport.get``, ``transport.post``, ...).
    """

    GET = "get"
    POST = "post"
    PUT = "put"
    DELETE = "delete"

    @property
    def has_body(self) -> bool:
        """Whether requests with this verb carry a body."""
        return self in (HTTPMethod.POST, HTTPMethod.PUT)


class NodeMode(str, enum.Enum):
    """The two operating modes of a resource node."""

    COLLECTION = "collection"
    SINGLE = "single"


@dataclass(frozen=True)
class RequestParams:
    """Canonical positional shape of one transport call.

    Produced by :func:`~restnest.params.normalize_params`. ``body`` is only
    ever set for body-carrying verbs.
    """

    path: str
    body: Any = None
    query: Optional[dict[str, Any]] = None
    headers: Optional[dict[str, str]] = None


@dataclass(frozen=True)
class RequestDescriptor:
    """One outgoing call: verb, composed path and optional body/query/headers.

    Attributes:
        method: The HTTP verb.
        path: The fully composed request path.
        body: Request body for POST / PUT, otherwise ``None``.
        query: Query parameters, or ``None`` when the caller supplied none.
        headers: Extra headers, or ``None`` when the caller supplied none.
    """

    method: HTTPMethod
    path: str
    body: Any = None
    query: Optional[dict[str, Any]] = None
    headers: Optional[dict[str, str]] = None

    def transport_args(self) -> tuple[Any, ...]:
        """Return the positional arguments for the transport verb call.

        Body-carrying verbs get ``(path, body, query, headers)``, the others
        ``(path, query, headers)``. Absent values are passed as ``None``.
        """
        if self.method.has_body:
            return (self.path, self.body, self.query, self.headers)
        return (self.path, self.query, self.headers)


# --- Configuration models ---


class TransportConfig(BaseModel):
    """Settings for :class:`~restnest.transport.http.HttpTransport`.

    Resolved by :func:`~restnest.config.resolve_config` from explicit
    arguments, ``RESTNEST_*`` environment variables and an optional
    project-local ``restnest.json``.

    Example::

        TransportConfig(
            base_url="https://api.example.com",
            root_path="/v1/accounts",
            headers={"Authorization": "Bearer s3cr3t"},
        )
    """

    model_config = ConfigDict(extra="forbid")

    base_url: str = Field(default="", description="Scheme and host prepended to every path")
    root_path: str = Field(default="", description="Root path handed to the client factory")
    timeout: float = Field(default=30, gt=0, description="Request timeout in seconds")
    verify_ssl: bool = Field(default=True, description="Verify SSL certificates")
    follow_redirects: bool = Field(default=True, description="Follow HTTP redirects")
    headers: dict[str, str] = Field(
        default_factory=dict, description="Default headers sent with every request"
    )
