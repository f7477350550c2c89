"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds and loads the HashTable and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from dnsblock.domain.errors import ConfigurationError
from dnsblock.domain.table import HashTable
from dnsblock.output.formatters import OutputSettings, format_result
from dnsblock.services.load import LoadService
from dnsblock.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from dnsblock.config.settings import DnsblockSettings


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: DnsblockSettings) -> None:
        self.settings = settings

        from dnsblock.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings were already logged to stderr as they occurred.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(result, settings=self._output_settings())
        if result.ok:
            click.echo(output)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)

    def report(self, result: ServiceResult) -> None:
        """Write a side result to stderr, keeping stdout for verdict lines."""
        click.echo(format_result(result, settings=self._output_settings()), err=True)

    def fail(self, result: ServiceResult) -> NoReturn:
        """Report a failed result on stderr and exit 1."""
        self.emit(result)
        raise SystemExit(1)

    def build_table(self, table_size: int | None) -> HashTable:
        """Allocate an empty table; CLI size wins over configured size."""
        size = table_size if table_size is not None else self.settings.table.size
        try:
            return HashTable(size)
        except ConfigurationError as exc:
            raise click.UsageError(str(exc)) from exc
        except MemoryError:
            self.fail(
                ServiceResult(
                    ok=False,
                    op="build_table",
                    error=ServiceError(
                        code="RESOURCE_EXHAUSTED",
                        message="Unable to allocate space for hash table",
                        detail={"size": size},
                    ),
                )
            )

    def resolve_blockfile(self, blockfile: Path | None) -> Path:
        path = blockfile or self.settings.blocklist_path()
        if path is None:
            raise click.UsageError("-b blockfile is required")
        return path

    def load_table(
        self, blockfile: Path | None, table_size: int | None
    ) -> tuple[HashTable, ServiceResult]:
        """Resolve the blocklist, then build and populate a table.

        Exits on any failure, closing the partially loaded table first.
        """
        path = self.resolve_blockfile(blockfile)
        table = self.build_table(table_size)
        result = LoadService(table).load_file(path)
        if not result.ok:
            table.close()
            self.fail(result)
        return table, result
