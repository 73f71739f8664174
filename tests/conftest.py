"""Shared test fixtures for restnest.

Provides a recording transport, a client factory rooted at ``/api`` and a
sequential identifier generator. These fixtures are automatically
discovered by pytest and available to all test modules without explicit
imports.
"""

from __future__ import annotations

import itertools
from typing import Callable

import pytest

from restnest import ClientFactory, init
from restnest.transport import RecordingTransport

MOCK_ROOT = "/api"


# ---------------------------------------------------------------------------
# Transport and factory
# ---------------------------------------------------------------------------


@pytest.fixture
def recording_transport() -> RecordingTransport:
    """A transport that records and echoes every request."""
    return RecordingTransport()


@pytest.fixture
def factory(recording_transport: RecordingTransport) -> ClientFactory:
    """A client factory bound to the recording transport at ``/api``."""
    return init(recording_transport, MOCK_ROOT)


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


@pytest.fixture
def gen_id() -> Callable[[], str]:
    """Return a generator of unique ids: ``id-0``, ``id-1``, ...

    A fresh counter is created for each test.
    """
    counter = itertools.count()
    return lambda: f"id-{next(counter)}"
