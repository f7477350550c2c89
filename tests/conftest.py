"""Shared pytest fixtures for dnsblock tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

SCENARIO_BLOCKLIST = """\
ads.example.com
# comment

tracker.example.net
ads.example.com
"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _isolated_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Generator[None]:
    """Run each test in a clean directory with no dnsblock env overrides.

    Also restores root logger state, since the CLI reconfigures logging.
    """
    for key in ("DNSBLOCK_CONFIG", "DNSBLOCK_TABLE__SIZE", "DNSBLOCK_BLOCKLIST__PATH"):
        monkeypatch.delenv(key, raising=False)
    monkeypatch.chdir(tmp_path)
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    pkg = logging.getLogger("dnsblock")
    pkg_level = pkg.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    pkg.setLevel(pkg_level)


@pytest.fixture
def write_blocklist(tmp_path: Path) -> Callable[..., Path]:
    """Factory writing blocklist content (str or bytes) to a temp file."""

    def _write(content: str | bytes, name: str = "blocklist.txt") -> Path:
        path = tmp_path / name
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
        return path

    return _write


@pytest.fixture
def scenario_blocklist(write_blocklist: Callable[..., Path]) -> Path:
    """Two names, one comment, one blank line, one duplicate."""
    return write_blocklist(SCENARIO_BLOCKLIST)
