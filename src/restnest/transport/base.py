"""The transport adapter contract consumed by the resource node engine.

A transport performs the actual network I/O for the four verbs. Every verb
is a coroutine returning a sequence whose first element is the decoded
payload; any further elements are transport metadata (for
:class:`~restnest.transport.http.HttpTransport`, the raw
:class:`httpx.Response`) that the engine passes through untouched.

The engine always calls a transport with the full positional arity and
``None`` for absent values::

    await transport.get(path, query, headers)
    await transport.post(path, body, query, headers)
    await transport.put(path, body, query, headers)
    await transport.delete(path, query, headers)

Caching, retries and authentication are the transport's business.
"""

from __future__ import annotations

from typing import Any, Optional, Protocol, Sequence

TRANSPORT_VERBS = ("get", "post", "put", "delete")
"""Names of the coroutine methods every transport must provide."""


class TransportAdapter(Protocol):
    """Structural type of a transport adapter.

    Used for static typing only. A resource node answers any public
    attribute with a child collection, so a ``hasattr``-based runtime check
    cannot tell it from a transport; :func:`~restnest.factory.init` checks
    that each verb is callable instead.
    """

    async def get(
        self,
        path: str,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Sequence[Any]: ...

    async def post(
        self,
        path: str,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Sequence[Any]: ...

    async def put(
        self,
        path: str,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Sequence[Any]: ...

    async def delete(
        self,
        path: str,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Sequence[Any]: ...
