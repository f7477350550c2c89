"""BaseService — shared foundation for services over one HashTable."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dnsblock.domain.table import HashTable


class BaseService:
    """Base for service-layer classes.

    Every service receives the :class:`HashTable` it operates on; the
    caller owns the table and decides when it is closed.
    """

    def __init__(self, table: HashTable) -> None:
        self._table = table

    @property
    def table(self) -> HashTable:
        return self._table
