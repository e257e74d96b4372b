"""Exception types raised by graphkit."""

from __future__ import annotations


class GraphKitError(Exception):
    """Base class for every error raised by graphkit."""


class GraphLoadError(GraphKitError):
    """Raised when a graph description file is missing, malformed or invalid."""


class DanglingEdgeError(GraphKitError, KeyError):
    """Raised by strict lookups when an id has no vertex behind it.

    Plain lookups (``get_vertex``) return ``None`` instead; only
    ``resolve`` raises this.
    """

    def __init__(self, vid: object) -> None:
        super().__init__(vid)
        self.vid = vid

    def __str__(self) -> str:
        return f"No vertex for id {self.vid!r}"


class IdentityCollisionError(GraphKitError):
    """Two unequal vertex values were mapped to the same derived id.

    This is an internal invariant break of a derived identity scheme and
    is not recoverable: the store cannot hold both values.
    """

    def __init__(self, vid: object, existing: object, incoming: object) -> None:
        super().__init__(
            f"Identity collision on id {vid!r}: {existing!r} != {incoming!r}"
        )
        self.vid = vid
        self.existing = existing
        self.incoming = incoming
