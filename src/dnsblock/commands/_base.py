"""Custom Click base classes with --examples support.

Commands built with ``cls=DnsblockCommand`` accept an ``examples``
string; ``--examples`` prints it and exits.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import click

from dnsblock.domain.errors import MIN_TABLE_SIZE


def _add_examples_option(cmd: click.Command, examples: str) -> None:
    """Attach an eager ``--examples`` flag to a Click command or group."""

    def show_examples(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    cmd.params.append(
        click.Option(
            ["--examples"],
            is_flag=True,
            expose_value=False,
            is_eager=True,
            callback=show_examples,
            help="Show usage examples.",
        )
    )


class DnsblockCommand(click.Command):
    """Click Command subclass that supports an ``--examples`` flag."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            _add_examples_option(self, examples)


def blocklist_options(func: Any) -> Any:
    """Shared ``-b/--blockfile`` and ``-t/--table-size`` options."""
    func = click.option(
        "-t",
        "--table-size",
        type=click.IntRange(min=MIN_TABLE_SIZE),
        default=None,
        help=f"Hash table size (>= {MIN_TABLE_SIZE}; default from config, 1873).",
    )(func)
    func = click.option(
        "-b",
        "--blockfile",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Blocklist file, one name per line.",
    )(func)
    return func
