"""LoadService — feed a blocklist file into a HashTable.

Lines are split on ``\n`` only and decoded with ``surrogateescape``.
Blank and ``#`` lines never reach the table. Each duplicate is logged as a
warning when it is met; loading continues with the original entry kept.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path

from dnsblock.domain.lines import decode_line, display_name, is_loadable, strip_terminator
from dnsblock.domain.table import LoadResult
from dnsblock.services.base import BaseService
from dnsblock.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


@dataclass
class LoadTally:
    """Running counts for one load pass."""

    inserted: int = 0
    skipped: int = 0
    duplicates: list[str] = field(default_factory=list)


class LoadService(BaseService):
    """Load phase: populate the table from blocklist lines."""

    def load_lines(self, lines: Iterable[bytes], tally: LoadTally | None = None) -> LoadTally:
        """Insert every loadable line. :class:`MemoryError` propagates."""
        tally = tally if tally is not None else LoadTally()
        for raw in lines:
            name = strip_terminator(decode_line(raw))
            if not is_loadable(name):
                tally.skipped += 1
                continue
            if self._table.load(name) is LoadResult.DUPLICATE:
                logger.warning("Duplicate blocklist entry: %s", display_name(name))
                tally.duplicates.append(name)
            else:
                tally.inserted += 1
        return tally

    def load_file(self, path: Path) -> ServiceResult:
        """Load a blocklist file.

        Fails with ``BLOCKLIST_UNREADABLE`` if the file cannot be opened
        or read, and ``RESOURCE_EXHAUSTED`` if the table runs out of memory.
        """
        op = "load_blocklist"
        tally = LoadTally()
        try:
            with path.open("rb") as fh:
                self.load_lines(fh, tally)
        except OSError as exc:
            reason = exc.strerror or str(exc)
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="BLOCKLIST_UNREADABLE",
                    message=f"File {path} could not be opened: {reason}",
                    detail={"path": str(path)},
                ),
            )
        except MemoryError:
            return ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(
                    code="RESOURCE_EXHAUSTED",
                    message="Unable to allocate space for blocklist entry",
                    detail={"path": str(path), "inserted": tally.inserted},
                ),
            )

        logger.debug(
            "Loaded %s: %d inserted, %d duplicates, %d skipped",
            path,
            tally.inserted,
            len(tally.duplicates),
            tally.skipped,
        )
        return ServiceResult(
            ok=True,
            op=op,
            data={
                "path": str(path),
                "inserted": tally.inserted,
                "duplicates": len(tally.duplicates),
                "skipped": tally.skipped,
            },
            warnings=[
                f"Duplicate blocklist entry: {display_name(name)}" for name in tally.duplicates
            ],
        )
