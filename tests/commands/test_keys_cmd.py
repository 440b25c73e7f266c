"""Tests for the keys command."""

from __future__ import annotations

import json
from pathlib import Path

from click.testing import CliRunner

from dotprops.cli import cli
from dotprops.commands.keys import list_keys
from dotprops.config.models import ExtractorConfig

SAMPLE = """\
# service settings
app.name = orders
database.host = db.local
database.port = 5432
databases.extra = yes
"""


class TestListKeys:
    def test_all_entries(self, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = list_keys(path, prefix=None, config=ExtractorConfig())
        assert result.ok
        assert result.op == "keys"
        assert result.data["count"] == 4
        assert list(result.data["entries"]) == [
            "app.name",
            "database.host",
            "database.port",
            "databases.extra",
        ]

    def test_prefix_matches_whole_segments(self, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = list_keys(path, prefix="database", config=ExtractorConfig())
        assert result.data["entries"] == {"database.host": "db.local", "database.port": "5432"}

    def test_prefix_includes_exact_key(self, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = list_keys(path, prefix="app.name", config=ExtractorConfig())
        assert result.data["entries"] == {"app.name": "orders"}

    def test_malformed_input(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.properties"
        path.write_bytes(b"a=\xff\xfe")
        result = list_keys(path, prefix=None, config=ExtractorConfig())
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "MALFORMED_INPUT"
        assert result.error.detail["path"] == str(path)


class TestKeysCommand:
    def test_json_output(self, cli_runner: CliRunner, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = cli_runner.invoke(cli, ["--json", "keys", str(path)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["ok"] is True
        assert data["data"]["entries"]["database.port"] == "5432"

    def test_human_output(self, cli_runner: CliRunner, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = cli_runner.invoke(cli, ["keys", str(path), "--prefix", "database"])
        assert result.exit_code == 0, result.output
        assert "OK: keys" in result.output
        assert "database.host" in result.output
        assert "app.name" not in result.output

    def test_quiet(self, cli_runner: CliRunner, write_properties) -> None:
        path = write_properties(SAMPLE)
        result = cli_runner.invoke(cli, ["-q", "keys", str(path)])
        assert result.exit_code == 0
        assert result.output.strip() == "OK: keys"

    def test_malformed_exits_1(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "bad.properties"
        path.write_bytes(b"\xff")
        result = cli_runner.invoke(cli, ["--json", "keys", str(path)])
        assert result.exit_code == 1
        data = json.loads(result.output)
        assert data["error"]["code"] == "MALFORMED_INPUT"

    def test_missing_file(self, cli_runner: CliRunner, tmp_path: Path) -> None:
        result = cli_runner.invoke(cli, ["keys", str(tmp_path / "nope.properties")])
        assert result.exit_code == 2

    def test_config_file_changes_comment_prefixes(
        self, cli_runner: CliRunner, tmp_path: Path, write_properties
    ) -> None:
        config = tmp_path / "custom.toml"
        config.write_text('[extractor]\ncomment_prefixes = [";"]\n')
        path = write_properties("; skipped=1\n# kept=2\n")
        result = cli_runner.invoke(cli, ["--json", "-c", str(config), "keys", str(path)])
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert data["data"]["entries"] == {"# kept": "2"}
