"""Asynchronous httpx transport for restnest clients.

This module provides :class:`HttpTransport`, a
:class:`~restnest.transport.base.TransportAdapter` backed by
:class:`httpx.AsyncClient`. It sends JSON bodies, decodes JSON (or text)
responses, maps error statuses onto the
:class:`~restnest.exceptions.HTTPStatusError` family and supports a
dry-run mode that logs requests instead of sending them.

Each verb resolves to ``(payload, response)``: the decoded body first,
then the raw :class:`httpx.Response` as transport metadata.

.. note::
   The transport performs no retries, caching or credential handling.
   Pass static credentials through ``TransportConfig.headers`` or hand in
   a pre-configured :class:`httpx.AsyncClient` (e.g. with an
   :class:`httpx.Auth` attached).

Example::

    from restnest import init
    from restnest.transport import HttpTransport

    async with HttpTransport(TransportConfig(base_url="https://api.example.com")) as http:
        api = init(http, "/v1").create_client()
        orders = await api.for_("acme").orders.get_all({"page": 2})
"""

from __future__ import annotations

import json
import logging
from typing import Any, Optional

import httpx

from restnest.exceptions import (
    AuthError,
    ClientError,
    ConnectionError_,
    HTTPStatusError,
    NotFoundError,
    ServerError,
)
from restnest.models import HTTPMethod, TransportConfig
from restnest.transport.response import error_message, extract_response_data

logger = logging.getLogger(__name__)


class HttpTransport:
    """Asynchronous HTTP transport for resource nodes.

    Must be used as an async context manager unless an already open
    *client* is supplied, in which case the caller keeps ownership of it
    and the transport never closes it.

    Args:
        config: Connection settings (``base_url``, timeout, SSL
            verification, default headers). Defaults to
            :class:`~restnest.models.TransportConfig` defaults.
        client: Optional externally managed :class:`httpx.AsyncClient`.
        dry_run: When ``True``, requests are logged and a synthetic
            payload is returned without network I/O.

    Example::

        async with HttpTransport(config) as transport:
            payload, response = await transport.get("/users")
    """

    def __init__(
        self,
        config: Optional[TransportConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        dry_run: bool = False,
    ) -> None:
        self._config = config or TransportConfig()
        self._client = client
        self._owns_client = client is None
        self._dry_run = dry_run

    @property
    def config(self) -> TransportConfig:
        """The connection settings in use."""
        return self._config

    # ------------------------------------------------------------------ #
    # Async context manager
    # ------------------------------------------------------------------ #

    async def __aenter__(self) -> HttpTransport:
        if self._client is None:
            config = self._config
            self._client = httpx.AsyncClient(
                base_url=config.base_url,
                timeout=config.timeout,
                verify=config.verify_ssl,
                follow_redirects=config.follow_redirects,
                headers=config.headers,
            )
            self._owns_client = True
            logger.info("Opened HTTP transport for %s", config.base_url or "<relative>")
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying client if this transport created it."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
            logger.info("Closed HTTP transport for %s", self._config.base_url or "<relative>")

    # ------------------------------------------------------------------ #
    # Transport verbs
    # ------------------------------------------------------------------ #

    async def get(
        self,
        path: str,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> tuple[Any, httpx.Response]:
        """Send a GET request and return ``(payload, response)``."""
        return await self.request(HTTPMethod.GET, path, query=query, headers=headers)

    async def post(
        self,
        path: str,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> tuple[Any, httpx.Response]:
        """Send a POST request with a JSON *body* and return ``(payload, response)``."""
        return await self.request(HTTPMethod.POST, path, body=body, query=query, headers=headers)

    async def put(
        self,
        path: str,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> tuple[Any, httpx.Response]:
        """Send a PUT request with a JSON *body* and return ``(payload, response)``."""
        return await self.request(HTTPMethod.PUT, path, body=body, query=query, headers=headers)

    async def delete(
        self,
        path: str,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> tuple[Any, httpx.Response]:
        """Send a DELETE request and return ``(payload, response)``."""
        return await self.request(HTTPMethod.DELETE, path, query=query, headers=headers)

    async def request(
        self,
        method: HTTPMethod,
        path: str,
        body: Any = None,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> tuple[Any, httpx.Response]:
        """Send one request, decode the body and map error statuses.

        Args:
            method: The HTTP verb.
            path: URL path appended to the configured ``base_url``.
            body: JSON-serialisable body (only sent for POST / PUT).
            query: Query parameters.
            headers: Extra request headers, merged over the defaults.

        Returns:
            ``(payload, response)``.

        Raises:
            AuthError: On 401 / 403.
            NotFoundError: On 404.
            ClientError: On any other 4xx.
            ServerError: On 5xx.
            ConnectionError_: On any httpx transport failure (connect,
                timeout, protocol, proxy).
        """
        if self._dry_run:
            return self._dry_run_response(method, path, body, query, headers)

        if self._client is None:
            raise RuntimeError("Transport not initialised -- use as async context manager")

        kwargs: dict[str, Any] = {
            "method": method.value.upper(),
            "url": path,
        }
        if query is not None:
            kwargs["params"] = query
        if headers is not None:
            kwargs["headers"] = headers
        if method.has_body and body is not None:
            kwargs["json"] = body

        try:
            response = await self._client.request(**kwargs)
        except httpx.TransportError as exc:
            logger.debug("%s %s failed: %s", kwargs["method"], path, exc)
            raise ConnectionError_(f"Connection failed: {exc}") from exc

        logger.debug("%s %s -> %s", kwargs["method"], path, response.status_code)

        payload = extract_response_data(response)
        self._raise_for_status(response, payload)
        return payload, response

    # ------------------------------------------------------------------ #
    # Private helpers
    # ------------------------------------------------------------------ #

    def _raise_for_status(self, response: httpx.Response, payload: Any) -> None:
        """Raise a typed exception for error HTTP status codes."""
        status = response.status_code
        if status < 400:
            return

        message = error_message(response, payload)
        logger.warning("%s %s failed: %s", response.request.method, response.request.url, message)

        exc_cls: type[HTTPStatusError]
        if status in (401, 403):
            exc_cls = AuthError
        elif status == 404:
            exc_cls = NotFoundError
        elif status >= 500:
            exc_cls = ServerError
        else:
            exc_cls = ClientError
        raise exc_cls(message, status_code=status, payload=payload)

    def _dry_run_response(
        self,
        method: HTTPMethod,
        path: str,
        body: Any,
        query: Optional[dict[str, Any]],
        headers: Optional[dict[str, str]],
    ) -> tuple[Any, httpx.Response]:
        """Log request details and return a synthetic 200 response."""
        verb = method.value.upper()
        url = f"{self._config.base_url}{path}"
        logger.info("[dry-run] %s %s", verb, url)

        for key, value in (headers or {}).items():
            logger.info("  Header: %s: %s", key, value)
        for key, value in (query or {}).items():
            logger.info("  Param: %s=%s", key, value)
        if method.has_body and body is not None:
            logger.info("  Body (JSON): %s", json.dumps(body, indent=2, default=str))

        response = httpx.Response(
            status_code=200,
            headers={"content-type": "application/json"},
            json={"dry_run": True, "message": "Request was not sent"},
            request=httpx.Request(method=verb, url=url or "/"),
        )
        return response.json(), response
