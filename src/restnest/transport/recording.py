"""In-memory transport that records requests instead of sending them.

:class:`RecordingTransport` is useful in tests and for inspecting what a
navigation chain would send. Every verb call is normalized into a
:class:`~restnest.models.RequestDescriptor`, appended to
:attr:`RecordingTransport.requests`, and answered with a one-element
response tuple. By default the payload is the descriptor itself, so::

    transport = RecordingTransport()
    api = init(transport, "/api").create_client()
    sent = await api.for_("7").orders.get_all()
    assert sent.path == "/api/7/orders"
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional, Union

from restnest.exceptions import InvalidUsageError
from restnest.models import HTTPMethod, RequestDescriptor
from restnest.params import build_request, describe

logger = logging.getLogger(__name__)

Responder = Callable[[RequestDescriptor], Any]


class RecordingTransport:
    """Transport adapter that records every call.

    Args:
        respond: Optional callable mapping each descriptor to the payload
            to return. Defaults to echoing the descriptor back.
        error: Optional exception raised (after recording) on every call,
            or a callable returning the exception for a descriptor (or
            ``None`` to answer normally).
    """

    def __init__(
        self,
        respond: Optional[Responder] = None,
        error: Union[BaseException, Callable[[RequestDescriptor], Optional[BaseException]], None] = None,
    ) -> None:
        self._respond = respond
        self._error = error
        self.requests: list[RequestDescriptor] = []

    @property
    def last_request(self) -> Optional[RequestDescriptor]:
        """The most recently recorded descriptor, or ``None``."""
        return self.requests[-1] if self.requests else None

    def reset(self) -> None:
        """Forget all recorded requests."""
        self.requests.clear()

    async def get(self, *args: Any) -> tuple[Any]:
        return self._record(HTTPMethod.GET, args)

    async def post(self, *args: Any) -> tuple[Any]:
        return self._record(HTTPMethod.POST, args)

    async def put(self, *args: Any) -> tuple[Any]:
        return self._record(HTTPMethod.PUT, args)

    async def delete(self, *args: Any) -> tuple[Any]:
        return self._record(HTTPMethod.DELETE, args)

    def _record(self, method: HTTPMethod, args: tuple[Any, ...]) -> tuple[Any]:
        if not args:
            raise InvalidUsageError(f"{method.value.upper()} needs a request path")
        path, *rest = args
        descriptor = build_request(method, path, *rest)
        self.requests.append(descriptor)
        logger.debug("Recorded %s", describe(descriptor))

        error = self._error(descriptor) if callable(self._error) else self._error
        if error is not None:
            raise error

        payload = self._respond(descriptor) if self._respond else descriptor
        return (payload,)
