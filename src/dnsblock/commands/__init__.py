"""Subcommand modules for dnsblock.

Provides register_commands() which uses deferred imports to keep
``dnsblock --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the standalone commands on the root CLI group."""
    from dnsblock.commands.query import query
    from dnsblock.commands.stats import stats

    cli.add_command(query)
    cli.add_command(stats)
