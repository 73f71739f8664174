"""Transport adapters for restnest.

A transport performs the network I/O behind the four verbs a resource node
issues. Any object providing ``get``, ``post``, ``put`` and ``delete``
coroutines that resolve to a sequence (payload first) will do; this
package ships two:

Classes:
    :class:`HttpTransport` -- real HTTP via :class:`httpx.AsyncClient`.
    :class:`RecordingTransport` -- in-memory, records and echoes requests.

Example::

    from restnest.transport import HttpTransport

    async with HttpTransport(config) as transport:
        payload, response = await transport.get("/users")
"""

from restnest.transport.base import TRANSPORT_VERBS, TransportAdapter
from restnest.transport.http import HttpTransport
from restnest.transport.recording import RecordingTransport

__all__ = ["TransportAdapter", "TRANSPORT_VERBS", "HttpTransport", "RecordingTransport"]
