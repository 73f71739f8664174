"""restnest -- clients for tree-shaped REST resource hierarchies.

Bind a transport to a root path and navigate the API the way its URLs are
nested. Collections list and create, ``for_(...)`` selects one entity,
and any other attribute descends into a nested collection::

    from restnest import init, resolve_config
    from restnest.transport import HttpTransport

    async with HttpTransport(resolve_config()) as http:
        api = init(http, "/api").create_client()
        await api.get_all()                                  # GET /api
        await api.for_("acme").orders.create({"sku": 1})     # POST /api/acme/orders
        await api.for_("acme").orders.for_(7).delete()       # DELETE /api/acme/orders/7

Modules:
    factory: :func:`init` and :class:`ClientFactory`.
    nodes: The immutable collection / single resource nodes.
    paths: Path composition with composite identifiers.
    params: Normalization of variadic verb arguments.
    transport: Transport contract plus httpx and recording transports.
    config: Transport configuration resolution.
    exceptions: Exception hierarchy.
"""

from restnest.config import resolve_config
from restnest.exceptions import InvalidUsageError, RestnestError
from restnest.factory import ClientFactory, init
from restnest.models import HTTPMethod, NodeMode, RequestDescriptor, TransportConfig
from restnest.nodes import CollectionNode, ResourceNode, SingleNode

__version__ = "0.1.0"

__all__ = [
    "init",
    "ClientFactory",
    "ResourceNode",
    "CollectionNode",
    "SingleNode",
    "HTTPMethod",
    "NodeMode",
    "RequestDescriptor",
    "TransportConfig",
    "resolve_config",
    "RestnestError",
    "InvalidUsageError",
]
