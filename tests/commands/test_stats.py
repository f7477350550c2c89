"""Tests for the stats command."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

from click.testing import CliRunner

from dnsblock.cli import cli


class TestStatsCommand:
    def test_json(self, cli_runner: CliRunner, scenario_blocklist: Path) -> None:
        result = cli_runner.invoke(cli, ["--json", "stats", "-b", str(scenario_blocklist)])
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["ok"] is True
        assert data["op"] == "stats"
        assert data["data"]["total_entries"] == 2
        assert data["data"]["size"] == 1873
        assert data["warnings"] == ["Duplicate blocklist entry: ads.example.com"]
        assert data["meta"]["load"]["duplicates"] == 1

    def test_human(self, cli_runner: CliRunner, scenario_blocklist: Path) -> None:
        result = cli_runner.invoke(cli, ["stats", "-b", str(scenario_blocklist), "-t", "3"])
        assert result.exit_code == 0
        assert "Total entries" in result.stdout
        assert "Duplicate blocklist entry: ads.example.com" in result.stderr
        assert "Duplicate" not in result.stdout

    def test_comments_only_blocklist(
        self, cli_runner: CliRunner, write_blocklist: Callable[..., Path]
    ) -> None:
        path = write_blocklist("# nothing\n\n# here\n")
        result = cli_runner.invoke(cli, ["--json", "stats", "-b", str(path)])
        data = json.loads(result.stdout)
        assert data["data"]["total_entries"] == 0
        assert data["data"]["shortest_chain"] == 0
        assert data["data"]["longest_chain"] == 0

    def test_entry_count_independent_of_size(
        self, cli_runner: CliRunner, write_blocklist: Callable[..., Path]
    ) -> None:
        path = write_blocklist("".join(f"host{i}.example\n" for i in range(50)))
        for size in ("3", "17", "1873"):
            result = cli_runner.invoke(cli, ["--json", "stats", "-b", str(path), "-t", size])
            assert json.loads(result.stdout)["data"]["total_entries"] == 50

    def test_missing_blockfile(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["stats", "-b", str(tmp_path / "nope.txt")])
        assert result.exit_code == 1
        assert result.stdout == ""
        assert "ERROR" in result.stderr
