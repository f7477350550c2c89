"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults live here, dnsblock.toml only holds overrides.
"""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field

from dnsblock.domain.errors import DEFAULT_TABLE_SIZE, MIN_TABLE_SIZE


class TableConfig(BaseModel):
    """[table] section."""

    model_config = {"frozen": True}

    size: int = Field(default=DEFAULT_TABLE_SIZE, ge=MIN_TABLE_SIZE)


class BlocklistConfig(BaseModel):
    """[blocklist] section."""

    model_config = {"frozen": True}

    path: Path | None = None
