"""Identity schemes: how a derived-identity graph turns a vertex into an id."""

from __future__ import annotations

import hashlib
import struct
from collections.abc import Hashable
from typing import Protocol, TypeVar

V = TypeVar("V", bound=Hashable)
V_contra = TypeVar("V_contra", bound=Hashable, contravariant=True)

_U64_MASK = (1 << 64) - 1


class IdentityScheme(Protocol[V_contra]):
    """Computes a stable id from a vertex value.

    A scheme is fixed when the graph is constructed and never swapped
    afterwards.  Equal values must map to equal ids.
    """

    def vid_of(self, vertex: V_contra) -> Hashable:
        """Return the id *vertex* is stored under."""
        ...


class ValueIdentity:
    """The vertex value is its own id."""

    def vid_of(self, vertex: V) -> V:
        return vertex

    def __repr__(self) -> str:
        return "ValueIdentity()"


def _lp(data: bytes) -> bytes:
    """Length-prefix a byte string with a 4-byte big-endian length."""
    return struct.pack("!I", len(data)) + data


def _int_bytes(value: int) -> bytes:
    return value.to_bytes(value.bit_length() // 8 + 1, "big", signed=True)


def _canonicalize(value: object) -> bytes | None:
    """Type-tagged byte encoding of *value*, or None if it has none.

    Values that compare equal encode identically: bools and integral
    floats encode as ints, and frozenset members are sorted by encoding.
    """
    if value is None:
        return b"n"
    if isinstance(value, int):
        return b"i" + _int_bytes(int(value))
    if isinstance(value, float):
        if value.is_integer():
            return b"i" + _int_bytes(int(value))
        return b"f" + struct.pack("!d", value)
    if isinstance(value, str):
        return b"s" + value.encode("utf-8", "surrogatepass")
    if isinstance(value, bytes):
        return b"b" + value
    if isinstance(value, (tuple, frozenset)):
        parts = []
        for item in value:
            encoded = _canonicalize(item)
            if encoded is None:
                return None
            parts.append(_lp(encoded))
        if isinstance(value, frozenset):
            return b"z" + b"".join(sorted(parts))
        return b"t" + b"".join(parts)
    return None


class HashIdentity:
    """Id is a 64-bit digest of the value.

    None, ints, floats, strings and bytes, and tuples or frozensets built
    from them, are digested with SHA-256 over a type-tagged encoding, so
    their ids are the same in every process.  Other hashable values fall
    back to the built-in ``hash()``, which is only stable within one
    interpreter run.  Two unequal values sharing an id is a collision;
    the graph detects it and raises IdentityCollisionError.
    """

    def vid_of(self, vertex: Hashable) -> int:
        canonical = _canonicalize(vertex)
        if canonical is None:
            return hash(vertex) & _U64_MASK
        digest = hashlib.sha256(canonical).digest()
        return int.from_bytes(digest[:8], "big")

    def __repr__(self) -> str:
        return "HashIdentity()"
