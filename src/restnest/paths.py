"""Path composition for resource nodes.

A node's request path is its root path followed by an ordered sequence of
segments. Each segment is either a literal collection name (``"orders"``)
or an identifier tuple selecting one instance (``("42",)``). Composite
identifiers are tuples with more than one part and expand into that many
consecutive path components::

    compose_path("/api", ["accounts", ("7",), "orders", ("2024", "A-1")])
    # "/api/accounts/7/orders/2024/A-1"

Components are joined with exactly one ``/`` regardless of trailing
slashes on the root or stray slashes on a segment, and empty components
are dropped so the result never contains ``//`` below the root.
"""

from __future__ import annotations

from typing import Iterable, Sequence, Union

from restnest.exceptions import InvalidUsageError

IdPart = Union[str, int, float]
"""A primitive identifier component."""

Identifier = tuple[str, ...]
"""A normalized (stringified, non-empty) identifier."""

Segment = Union[str, Identifier]
"""One path segment: a literal name or an identifier tuple."""


def normalize_identifier(parts: Sequence[IdPart]) -> Identifier:
    """Validate and stringify the parts of a (possibly composite) identifier.

    Args:
        parts: One or more primitive values (``str``, ``int`` or ``float``).

    Returns:
        The parts converted to strings, in their given order.

    Raises:
        InvalidUsageError: If *parts* is empty, contains a value that is
            not a primitive (``None``, ``bool``, containers, ...) or contains
            a part that is blank once edge slashes are stripped.
    """
    if not parts:
        raise InvalidUsageError("An identifier needs at least one component")

    normalized: list[str] = []
    for part in parts:
        # bool is an int subclass but never a meaningful resource key.
        if isinstance(part, bool) or not isinstance(part, (str, int, float)):
            raise InvalidUsageError(
                f"Identifier components must be str, int or float, got {type(part).__name__}"
            )
        text = str(part)
        # A blank part would collapse into the parent collection path.
        if not text.strip("/"):
            raise InvalidUsageError(f"Identifier components must not be blank, got {text!r}")
        normalized.append(text)
    return tuple(normalized)


def compose_path(root: str, segments: Iterable[Segment] = ()) -> str:
    """Join *root* and *segments* into a single request path.

    Args:
        root: The root path (may be empty, may end with ``/``, may be an
            absolute URL).
        segments: Ordered literal names and identifier tuples.

    Returns:
        The composed path. An empty root yields a path starting with
        ``/``; a bare ``/`` root with no segments yields ``/``.

    Raises:
        InvalidUsageError: If a segment is an empty identifier tuple.

    Example::

        compose_path("/api/", ["nest1", ("a", "b")])   # "/api/nest1/a/b"
        compose_path("", [("id-0",)])                  # "/id-0"
    """
    path = root.rstrip("/")
    for component in _flatten(segments):
        component = component.strip("/")
        if component:
            path = f"{path}/{component}"

    if not path and root.startswith("/"):
        return "/"
    return path


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _flatten(segments: Iterable[Segment]) -> Iterable[str]:
    """Expand identifier tuples into their individual components."""
    for segment in segments:
        if isinstance(segment, tuple):
            if not segment:
                raise InvalidUsageError("An identifier needs at least one component")
            yield from segment
        else:
            yield segment
