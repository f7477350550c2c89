"""Name digest used to pick a bucket.

Each byte ``c`` is folded into the accumulator as
``acc = c + (acc << 6) + (acc << 16) - acc``, wrapping at 64 bits.

INVARIANT: The digest depends only on the name's bytes.
"""

from __future__ import annotations

DIGEST_BITS = 64
_MASK = (1 << DIGEST_BITS) - 1


def encode_name(name: str) -> bytes:
    """Encode a name back to the bytes it was read from."""
    return name.encode("utf-8", "surrogateescape")


def hash_name(name: str | bytes) -> int:
    """Return the unsigned 64-bit digest of *name*."""
    data = name if isinstance(name, bytes) else encode_name(name)
    acc = 0
    for c in data:
        acc = (c + (acc << 6) + (acc << 16) - acc) & _MASK
    return acc
