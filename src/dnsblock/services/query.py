"""QueryService — classify names against a loaded HashTable.

Every line is looked up verbatim after its newline is removed: blank
lines are queried as ``""`` and ``#`` lines are not treated as comments.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass

from dnsblock.domain.lines import decode_line, strip_terminator
from dnsblock.services.base import BaseService
from dnsblock.services.result import ServiceResult

logger = logging.getLogger(__name__)

BLOCKED_LABEL = "[blocked]"
NOT_BLOCKED_LABEL = "[not blocked]"


@dataclass(frozen=True)
class Verdict:
    """Classification of one queried name."""

    name: str
    blocked: bool

    @property
    def label(self) -> str:
        return BLOCKED_LABEL if self.blocked else NOT_BLOCKED_LABEL

    def __str__(self) -> str:
        return f"{self.name} {self.label}"


class QueryService(BaseService):
    """Query phase: read-only lookups."""

    def classify(self, name: str) -> Verdict:
        return Verdict(name=name, blocked=self._table.query(name))

    def classify_lines(self, lines: Iterable[bytes]) -> Iterator[Verdict]:
        """Yield a verdict per raw line, lazily, in input order."""
        for raw in lines:
            yield self.classify(strip_terminator(decode_line(raw)))

    def run(self, lines: Iterable[bytes], sink: Callable[[Verdict], None]) -> ServiceResult:
        """Classify *lines*, handing each verdict to *sink* as soon as it is known."""
        queried = 0
        blocked = 0
        for verdict in self.classify_lines(lines):
            sink(verdict)
            queried += 1
            blocked += verdict.blocked
        logger.debug("Classified %d names, %d blocked", queried, blocked)
        return ServiceResult(
            ok=True,
            op="query",
            data={"queried": queried, "blocked": blocked, "not_blocked": queried - blocked},
        )
