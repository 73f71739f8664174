"""Tests for the in-memory recording transport."""

from __future__ import annotations

import inspect
from typing import Optional

import pytest

from restnest.exceptions import InvalidUsageError, ServerError
from restnest.models import HTTPMethod, RequestDescriptor
from restnest.transport import TRANSPORT_VERBS, RecordingTransport


class TestRecording:
    def test_provides_transport_verbs(self) -> None:
        transport = RecordingTransport()
        for verb in TRANSPORT_VERBS:
            assert inspect.iscoroutinefunction(getattr(transport, verb))

    @pytest.mark.asyncio
    async def test_echoes_descriptor(self) -> None:
        transport = RecordingTransport()
        (payload,) = await transport.get("/api", {"page": 1})
        assert payload == RequestDescriptor(method=HTTPMethod.GET, path="/api", query={"page": 1})
        assert transport.last_request is payload

    @pytest.mark.asyncio
    async def test_variadic_arguments_normalized(self) -> None:
        transport = RecordingTransport()
        await transport.post("/api", {"f1": 42})
        await transport.put("/api/1", {"f1": 43}, None, {"X": "1"})
        await transport.delete("/api/1")

        assert transport.requests == [
            RequestDescriptor(method=HTTPMethod.POST, path="/api", body={"f1": 42}),
            RequestDescriptor(method=HTTPMethod.PUT, path="/api/1", body={"f1": 43}, headers={"X": "1"}),
            RequestDescriptor(method=HTTPMethod.DELETE, path="/api/1"),
        ]

    @pytest.mark.asyncio
    async def test_missing_path_rejected(self) -> None:
        with pytest.raises(InvalidUsageError, match="needs a request path"):
            await RecordingTransport().get()

    @pytest.mark.asyncio
    async def test_too_many_arguments_rejected(self) -> None:
        with pytest.raises(InvalidUsageError):
            await RecordingTransport().get("/api", None, None, None)

    @pytest.mark.asyncio
    async def test_reset(self) -> None:
        transport = RecordingTransport()
        await transport.get("/api")
        transport.reset()
        assert transport.requests == []
        assert transport.last_request is None


class TestResponses:
    @pytest.mark.asyncio
    async def test_custom_responder(self) -> None:
        transport = RecordingTransport(respond=lambda req: {"path": req.path})
        assert await transport.get("/api/1") == ({"path": "/api/1"},)

    @pytest.mark.asyncio
    async def test_error_instance(self) -> None:
        error = ServerError("HTTP 503", status_code=503)
        transport = RecordingTransport(error=error)
        with pytest.raises(ServerError) as exc_info:
            await transport.delete("/api/1")
        assert exc_info.value is error
        assert len(transport.requests) == 1

    @pytest.mark.asyncio
    async def test_error_callable(self) -> None:
        def fail_on_delete(req: RequestDescriptor) -> Optional[Exception]:
            return RuntimeError("no deletes") if req.method is HTTPMethod.DELETE else None

        transport = RecordingTransport(error=fail_on_delete)
        await transport.get("/api/1")
        with pytest.raises(RuntimeError, match="no deletes"):
            await transport.delete("/api/1")
