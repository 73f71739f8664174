"""The resource node engine -- navigable, immutable views of a REST tree.

A resource node is a point in a nested REST resource hierarchy. It is in
one of two modes:

* :class:`CollectionNode` -- a list of entities at a path. Supports
  :meth:`~CollectionNode.get_all`, :meth:`~CollectionNode.create`,
  :meth:`~ResourceNode.delete` and instance selection with
  :meth:`~CollectionNode.for_`.
* :class:`SingleNode` -- one identified entity. Supports
  :meth:`~SingleNode.get`, :meth:`~SingleNode.update` and
  :meth:`~ResourceNode.delete`.

Any other public attribute accessed on either mode yields a new
:class:`CollectionNode` one path segment deeper, so nested sub-resources
need no registration::

    api = init(transport, "/api").create_client()
    await api.for_("acme").orders.for_(42).items.get_all()
    # GET /api/acme/orders/42/items

Name resolution order is fixed: members of the node's mode first (exact,
case-sensitive), then the dynamic child-collection rule. Names that start
with ``_`` and the mapping-protocol probe ``keys`` never create children;
they raise :class:`AttributeError` so that ``await``, ``copy``, ``dict()``
and introspection tools see an ordinary object. :meth:`ResourceNode.child`
reaches any collection explicitly, including names shadowed by members
(``api.child("delete")``) or that are not identifiers
(``api.child("line-items")``).

Nodes never perform I/O on navigation, hold no cache and cannot be
mutated; each navigation step allocates a new node sharing the parent's
transport.
"""

from __future__ import annotations

import logging
from typing import Any, ClassVar, Optional

from restnest.exceptions import InvalidUsageError
from restnest.models import HTTPMethod, NodeMode
from restnest.params import build_request, describe
from restnest.paths import IdPart, Segment, compose_path, normalize_identifier
from restnest.transport.base import TransportAdapter

logger = logging.getLogger(__name__)

PROTOCOL_NAMES = frozenset({"keys"})
"""Public names probed by Python protocols (``dict(obj)``, ``**obj``)."""


class ResourceNode:
    """Base class of both node modes.

    Args:
        transport: The transport adapter shared by the whole node tree.
        root: The root path the tree was created with.
        segments: Literal names and identifier tuples below the root.
    """

    __slots__ = ("_transport", "_root", "_segments", "_base_path")

    mode: ClassVar[NodeMode]
    _members: ClassVar[frozenset[str]] = frozenset(
        {"base_path", "mode", "transport", "child", "delete"}
    )

    def __init__(
        self,
        transport: TransportAdapter,
        root: str,
        segments: tuple[Segment, ...] = (),
    ) -> None:
        object.__setattr__(self, "_transport", transport)
        object.__setattr__(self, "_root", root)
        object.__setattr__(self, "_segments", tuple(segments))
        object.__setattr__(self, "_base_path", compose_path(root, segments))

    @property
    def base_path(self) -> str:
        """The request path of this node."""
        return self._base_path

    @property
    def transport(self) -> TransportAdapter:
        """The transport adapter shared by this node tree."""
        return self._transport

    # ------------------------------------------------------------------ #
    # Navigation
    # ------------------------------------------------------------------ #

    def child(self, name: str) -> CollectionNode:
        """Return the nested collection *name* below this node.

        Raises:
            InvalidUsageError: If *name* is empty or contains ``/``.
        """
        if not isinstance(name, str) or not name or "/" in name:
            raise InvalidUsageError(f"Invalid collection name: {name!r}")
        return CollectionNode(self._transport, self._root, self._segments + (name,))

    def __getattr__(self, name: str) -> CollectionNode:
        # Only called when normal lookup fails, i.e. for non-member names.
        if name.startswith("_") or name in PROTOCOL_NAMES:
            raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")
        return self.child(name)

    # ------------------------------------------------------------------ #
    # Verbs shared by both modes
    # ------------------------------------------------------------------ #

    async def delete(
        self,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue DELETE at :attr:`base_path`.

        The transport's payload is returned unchanged; most APIs send none.
        """
        return await self._send(HTTPMethod.DELETE, query, headers)

    async def _send(self, method: HTTPMethod, *args: Any) -> Any:
        """Dispatch one request to the transport and return its payload."""
        descriptor = build_request(method, self._base_path, *args)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("Dispatching %s", describe(descriptor))
        verb = getattr(self._transport, method.value)
        response = await verb(*descriptor.transport_args())
        return response[0]

    # ------------------------------------------------------------------ #
    # Value semantics
    # ------------------------------------------------------------------ #

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"'{type(self).__name__}' objects are immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"'{type(self).__name__}' objects are immutable")

    def __copy__(self) -> ResourceNode:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> ResourceNode:
        return self

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ResourceNode):
            return NotImplemented
        return self.mode is other.mode and self._base_path == other._base_path

    def __hash__(self) -> int:
        return hash((self.mode, self._base_path))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._base_path!r})"

    def __dir__(self) -> list[str]:
        return sorted(self._members)


class CollectionNode(ResourceNode):
    """A node addressing a collection of entities."""

    __slots__ = ()

    mode = NodeMode.COLLECTION
    _members = ResourceNode._members | {"get_all", "create", "for_"}

    async def get_all(
        self,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue GET at :attr:`base_path` and return the decoded list payload."""
        return await self._send(HTTPMethod.GET, query, headers)

    async def create(
        self,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue POST at :attr:`base_path` with *body* and return the created entity."""
        return await self._send(HTTPMethod.POST, body, query, headers)

    def for_(self, *ids: IdPart) -> SingleNode:
        """Select one entity of this collection.

        Several arguments form a composite identifier, appended to the
        path in order: ``for_("2024", "A-1")`` addresses
        ``<base_path>/2024/A-1``. Also reachable as ``getattr(node, "for")``.

        Raises:
            InvalidUsageError: Immediately, if no identifier is given or a
                part is not a ``str``, ``int`` or ``float``.
        """
        identifier = normalize_identifier(ids)
        return SingleNode(self._transport, self._root, self._segments + (identifier,))

    def __getattr__(self, name: str) -> Any:
        if name == "for":
            return self.for_
        return super().__getattr__(name)


class SingleNode(ResourceNode):
    """A node addressing one identified entity."""

    __slots__ = ()

    mode = NodeMode.SINGLE
    _members = ResourceNode._members | {"get", "update"}

    async def get(
        self,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue GET at :attr:`base_path` and return the decoded entity."""
        return await self._send(HTTPMethod.GET, query, headers)

    async def update(
        self,
        body: Any,
        query: Optional[dict[str, Any]] = None,
        headers: Optional[dict[str, str]] = None,
    ) -> Any:
        """Issue PUT at :attr:`base_path` with *body* and return the updated entity."""
        return await self._send(HTTPMethod.PUT, body, query, headers)
