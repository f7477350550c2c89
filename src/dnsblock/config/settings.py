"""Unified settings — CLI flags, env vars, and TOML config in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DNSBLOCK_*`` prefix, ``__`` for nested sections
  3. TOML file    — ``dnsblock.toml`` discovered via walk-up
  4. Code defaults — baked into the section models
"""

from __future__ import annotations

import threading
import tomllib
from pathlib import Path
from typing import Any

import click
from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dnsblock.config.discovery import find_config
from dnsblock.config.models import BlocklistConfig, TableConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``dnsblock.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            raw = toml_path.read_text(encoding="utf-8")
            try:
                self._data = tomllib.loads(raw)
            except tomllib.TOMLDecodeError as exc:
                msg = f"Invalid TOML in {toml_path}: {exc}"
                raise click.UsageError(msg) from exc

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class DnsblockSettings(BaseSettings):
    """Frozen settings for one dnsblock invocation.

    Stored on :class:`~dnsblock.commands._context.AppContext` at the CLI
    root and read by every subcommand.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DNSBLOCK_",
        "env_nested_delimiter": "__",
    }

    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    verbose: bool = False
    log_json: bool = False

    # --- TOML sections ---
    table: TableConfig = Field(default_factory=TableConfig)
    blocklist: BlocklistConfig = Field(default_factory=BlocklistConfig)

    def blocklist_path(self) -> Path | None:
        """Configured blocklist, relative paths anchored at the config file."""
        path = self.blocklist.path
        if path is None or path.is_absolute() or self.config_path is None:
            return path
        return self.config_path.parent / path

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        toml_path = getattr(_tls, "toml_path", None)
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, toml_path),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        start: Path | None = None,
        **cli_flags: Any,
    ) -> DnsblockSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when given, otherwise discovers ``dnsblock.toml``
        by walking up from *start*. Invalid values raise
        :class:`click.UsageError` (exit status 2).
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if not p.is_file():
                raise click.UsageError(f"Config file not found: {config_path}")
            toml_path = p
        else:
            toml_path = find_config(start)

        _tls.toml_path = toml_path
        try:
            return cls(config_path=toml_path, **cli_flags)
        except ValidationError as exc:
            source = toml_path or "environment"
            raise click.UsageError(f"Invalid configuration ({source}): {exc}") from exc
        finally:
            _tls.toml_path = None
