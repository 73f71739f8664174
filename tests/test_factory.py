"""Tests for restnest.factory -- init() and ClientFactory."""

from __future__ import annotations

from typing import Any

import pytest

from restnest import ClientFactory, CollectionNode, init
from restnest.exceptions import InvalidUsageError
from restnest.transport import RecordingTransport


class _NoDeleteTransport:
    async def get(self, *args: Any) -> tuple[Any]:
        return (None,)

    async def post(self, *args: Any) -> tuple[Any]:
        return (None,)

    async def put(self, *args: Any) -> tuple[Any]:
        return (None,)


class TestInit:
    def test_returns_factory(self, recording_transport: RecordingTransport) -> None:
        factory = init(recording_transport, "/api")
        assert isinstance(factory, ClientFactory)
        assert factory.transport is recording_transport
        assert factory.root_path == "/api"

    def test_default_root(self, recording_transport: RecordingTransport) -> None:
        assert init(recording_transport).root_path == ""

    def test_missing_verb_rejected(self) -> None:
        with pytest.raises(InvalidUsageError, match="missing verb\\(s\\): delete"):
            init(_NoDeleteTransport(), "/api")

    def test_resource_node_rejected_as_transport(self, factory: ClientFactory) -> None:
        node = factory.create_client()
        with pytest.raises(InvalidUsageError, match="missing verb\\(s\\): get, post, put"):
            init(node, "/api")  # type: ignore[arg-type]

    def test_non_string_root_rejected(self, recording_transport: RecordingTransport) -> None:
        with pytest.raises(InvalidUsageError, match="Root path"):
            init(recording_transport, 42)  # type: ignore[arg-type]

    def test_repr(self, recording_transport: RecordingTransport) -> None:
        assert repr(init(recording_transport, "/api")) == (
            "ClientFactory(root_path='/api', transport=RecordingTransport)"
        )


class TestCreateClient:
    def test_root_collection(self, factory: ClientFactory) -> None:
        cli = factory.create_client()
        assert isinstance(cli, CollectionNode)
        assert cli.base_path == "/api"

    def test_fresh_tree_per_call(self, factory: ClientFactory) -> None:
        first, second = factory.create_client(), factory.create_client()
        assert first is not second
        assert first == second
        assert first.transport is second.transport

    @pytest.mark.asyncio
    async def test_trees_are_independent(
        self, factory: ClientFactory, recording_transport: RecordingTransport
    ) -> None:
        first, second = factory.create_client(), factory.create_client()
        first.users.for_("1")
        await second.get_all()
        assert [r.path for r in recording_transport.requests] == ["/api"]

    @pytest.mark.asyncio
    async def test_empty_root(self, recording_transport: RecordingTransport) -> None:
        cli = init(recording_transport, "").create_client()
        sent = await cli.for_("id-0").get()
        assert sent.path == "/id-0"

    @pytest.mark.asyncio
    async def test_trailing_slash_root(self, recording_transport: RecordingTransport) -> None:
        cli = init(recording_transport, "/api/").create_client()
        sent = await cli.for_("id-0").nest1.get_all()
        assert sent.path == "/api/id-0/nest1"
