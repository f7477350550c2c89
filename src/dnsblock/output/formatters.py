"""Plain-text and JSON output helpers.

Three kinds of output:
- verdict lines on stdout, one per queried name;
- the stats report printed to stderr by ``query --stats``;
- ServiceResult documents, Rich-rendered for humans or JSON with ``--json``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from dnsblock.domain.hashing import encode_name

if TYPE_CHECKING:
    from dnsblock.domain.table import TableStats
    from dnsblock.services.query import Verdict
    from dnsblock.services.result import ServiceResult


class OutputSettings(BaseModel):
    """How a ServiceResult should be formatted."""

    model_config = {"frozen": True}

    json_output: bool = False
    verbose: bool = False


def format_verdict(verdict: Verdict) -> bytes:
    """Verdict line without its newline, in the input's original bytes."""
    return encode_name(str(verdict))


def format_stats_report(stats: TableStats) -> str:
    """Multi-line stats report."""
    return "\n".join(
        [
            f"Table size: {stats.size}",
            f"Total entries: {stats.total_entries}",
            f"Longest chain: {stats.longest_chain}",
            f"Shortest chain: {stats.shortest_chain}",
        ]
    )


def format_result(result: ServiceResult, *, settings: OutputSettings | None = None) -> str:
    """Format a ServiceResult for display."""
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json(indent=2)

    from dnsblock.output.renderers import render_result

    return render_result(result, verbose=settings.verbose)
