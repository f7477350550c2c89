"""Command: load a blocklist and classify names from stdin."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dnsblock.commands._base import DnsblockCommand, blocklist_options
from dnsblock.output.formatters import format_stats_report, format_verdict
from dnsblock.services.query import QueryService, Verdict

if TYPE_CHECKING:
    from pathlib import Path

    from dnsblock.commands._context import AppContext


def _echo_verdict(verdict: Verdict) -> None:
    click.echo(format_verdict(verdict))


@click.command(
    cls=DnsblockCommand,
    examples="""\
  dnsblock query -b blocklist.txt < names.txt
  dnsblock query -b blocklist.txt -t 4099 -s
  echo ads.example.com | dnsblock query -b blocklist.txt
  dnsblock -v query -b blocklist.txt < names.txt""",
)
@blocklist_options
@click.option(
    "-s",
    "--stats",
    "show_stats",
    is_flag=True,
    help="Print table stats to stderr before querying.",
)
@click.pass_obj
def query(
    app: AppContext,
    blockfile: Path | None,
    table_size: int | None,
    show_stats: bool,
) -> None:
    """Load a blocklist, then print [blocked] or [not blocked] for each stdin line."""
    table, _loaded = app.load_table(blockfile, table_size)
    with table:
        if show_stats:
            click.echo(format_stats_report(table.stats()), err=True)
        stdin = click.get_binary_stream("stdin")
        summary = QueryService(table).run(stdin, _echo_verdict)
    if app.settings.verbose:
        app.report(summary)
