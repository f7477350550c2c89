"""HashTable — fixed-size chained hash index of blocked names.

Two phases, strictly sequential:
- Load: :meth:`HashTable.load` inserts each name once, rejecting duplicates.
- Query: :meth:`HashTable.query` answers membership without mutation.

INVARIANT: ``bucket_index(name) == hash_name(name) % size`` for the
table's whole lifetime. The table is never resized.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import StrEnum
from typing import Any, Self

from dnsblock.domain.chain import Chain
from dnsblock.domain.errors import MIN_TABLE_SIZE, ConfigurationError
from dnsblock.domain.hashing import hash_name


class LoadResult(StrEnum):
    """Outcome of a single :meth:`HashTable.load` call."""

    INSERTED = "inserted"
    DUPLICATE = "duplicate"


@dataclass(frozen=True)
class TableStats:
    """Chain population summary.

    ``shortest_chain`` only considers non-empty chains and is 0 when the
    table holds no entries.
    """

    size: int
    total_entries: int
    longest_chain: int
    shortest_chain: int
    used_buckets: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


class HashTable:
    """Chained hash table owning every :class:`Chain` and entry.

    Usage::

        with HashTable(1873) as table:
            table.load("ads.example.com")
            table.query("ads.example.com")  # True
    """

    def __init__(self, size: int) -> None:
        if isinstance(size, bool) or not isinstance(size, int):
            msg = f"table size must be an integer, got {size!r}"
            raise ConfigurationError(msg)
        if size < MIN_TABLE_SIZE:
            msg = f"table size must be equal or larger than {MIN_TABLE_SIZE}, got {size}"
            raise ConfigurationError(msg)
        self._size = size
        self._chains: list[Chain] = [Chain() for _ in range(size)]

    @property
    def size(self) -> int:
        return self._size

    def bucket_index(self, name: str) -> int:
        """Bucket holding *name*: its digest modulo the table size."""
        return hash_name(name) % self._size

    def load(self, name: str) -> LoadResult:
        """Insert *name* unless an equal entry is already present.

        Raises :class:`MemoryError` if the entry cannot be stored.
        """
        if self.closed:
            raise ValueError("cannot load into a closed table")
        chain = self._chains[self.bucket_index(name)]
        if chain.contains(name):
            return LoadResult.DUPLICATE
        chain.insert_front(name)
        return LoadResult.INSERTED

    def query(self, name: str) -> bool:
        """Whether *name* was loaded. Never mutates the table."""
        if not self._chains:
            return False
        return self._chains[self.bucket_index(name)].contains(name)

    def stats(self) -> TableStats:
        """Walk every chain once and summarise the population."""
        total = 0
        longest = 0
        shortest: int | None = None
        used = 0
        for chain in self._chains:
            count = len(chain)
            if count == 0:
                continue
            used += 1
            total += count
            longest = max(longest, count)
            if shortest is None or count < shortest:
                shortest = count
        return TableStats(
            size=self._size,
            total_entries=total,
            longest_chain=longest,
            shortest_chain=shortest or 0,
            used_buckets=used,
        )

    def chain_lengths(self) -> list[int]:
        """Length of every chain, in bucket order."""
        return [len(chain) for chain in self._chains]

    def close(self) -> None:
        """Release every chain, then the bucket list itself."""
        for chain in self._chains:
            chain.clear()
        self._chains = []

    @property
    def closed(self) -> bool:
        return not self._chains

    def __enter__(self) -> Self:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.query(name)

    def __len__(self) -> int:
        return sum(len(chain) for chain in self._chains)

    def __repr__(self) -> str:
        return f"HashTable(size={self._size}, entries={len(self)})"
