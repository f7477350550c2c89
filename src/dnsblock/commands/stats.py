"""Command: load a blocklist and report chain statistics."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsblock.commands._base import DnsblockCommand, blocklist_options
from dnsblock.services.stats import StatsService

if TYPE_CHECKING:
    from pathlib import Path

    from dnsblock.commands._context import AppContext


@click.command(
    cls=DnsblockCommand,
    examples="""\
  dnsblock stats -b blocklist.txt
  dnsblock stats -b blocklist.txt -t 97
  dnsblock --json stats -b blocklist.txt""",
)
@blocklist_options
@click.pass_obj
def stats(app: AppContext, blockfile: Path | None, table_size: int | None) -> None:
    """Load a blocklist and show how entries spread across the table."""
    table, loaded = app.load_table(blockfile, table_size)
    with table:
        result = StatsService(table).stats()
    app.emit(
        result.model_copy(update={"warnings": loaded.warnings, "meta": {"load": loaded.data}})
    )
