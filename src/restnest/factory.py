"""Client factory -- the single entry point of restnest.

:func:`init` binds a transport adapter to a root path and returns a
:class:`ClientFactory` whose :meth:`~ClientFactory.create_client` hands
out fresh root :class:`~restnest.nodes.CollectionNode` objects::

    factory = init(transport, "/api")
    api = factory.create_client()
    await api.for_("id-0").nest1.get_all()   # GET /api/id-0/nest1
"""

from __future__ import annotations

import logging

from restnest.exceptions import InvalidUsageError
from restnest.nodes import CollectionNode
from restnest.transport.base import TRANSPORT_VERBS, TransportAdapter

logger = logging.getLogger(__name__)


class ClientFactory:
    """Creates root collection nodes sharing one transport and root path.

    Every :meth:`create_client` call returns an independent node tree;
    trees share nothing but the (read-only) transport reference.

    Args:
        transport: The transport adapter performing the requests.
        root_path: The path every client tree starts from.
    """

    def __init__(self, transport: TransportAdapter, root_path: str = "") -> None:
        self._transport = transport
        self._root_path = root_path

    @property
    def transport(self) -> TransportAdapter:
        """The bound transport adapter."""
        return self._transport

    @property
    def root_path(self) -> str:
        """The bound root path."""
        return self._root_path

    def create_client(self) -> CollectionNode:
        """Return a fresh root collection node at :attr:`root_path`."""
        return CollectionNode(self._transport, self._root_path)

    def __repr__(self) -> str:
        return f"ClientFactory(root_path={self._root_path!r}, transport={type(self._transport).__name__})"


def init(transport: TransportAdapter, root_path: str = "") -> ClientFactory:
    """Bind *transport* and *root_path* into a :class:`ClientFactory`.

    Args:
        transport: Any object providing ``get``, ``post``, ``put`` and
            ``delete`` coroutines (see
            :class:`~restnest.transport.base.TransportAdapter`).
        root_path: Root path (or absolute URL) of the resource tree.

    Raises:
        InvalidUsageError: If *transport* lacks one of the four verbs or
            *root_path* is not a string.
    """
    missing = [verb for verb in TRANSPORT_VERBS if not callable(getattr(transport, verb, None))]
    if missing:
        raise InvalidUsageError(
            f"Transport {type(transport).__name__} is missing verb(s): {', '.join(missing)}"
        )
    if not isinstance(root_path, str):
        raise InvalidUsageError(f"Root path must be a string, got {type(root_path).__name__}")

    logger.debug("Bound %s to root path %r", type(transport).__name__, root_path)
    return ClientFactory(transport, root_path)
