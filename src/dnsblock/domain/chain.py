"""Chain — the entries that share one bucket.

Entries are kept newest first. The chain does not enforce uniqueness;
:class:`~dnsblock.domain.table.HashTable` checks :meth:`Chain.contains`
before calling :meth:`Chain.insert_front`.
"""

from __future__ import annotations

from collections.abc import Iterator


class Chain:
    """Ordered collection of names hashed to the same bucket."""

    __slots__ = ("_entries",)

    def __init__(self) -> None:
        self._entries: list[str] = []

    def contains(self, name: str) -> bool:
        """Linear scan for an entry equal to *name*."""
        for entry in self._entries:
            if entry == name:
                return True
        return False

    def insert_front(self, name: str) -> Chain:
        """Prepend *name* and return the chain."""
        self._entries.insert(0, name)
        return self

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.contains(name)

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __repr__(self) -> str:
        return f"Chain({self._entries!r})"
