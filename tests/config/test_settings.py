"""Tests for DotpropsSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from dotprops.config.discovery import CONFIG_FILENAME
from dotprops.config.settings import DotpropsSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        settings = DotpropsSettings.from_cli(cwd=tmp_path)
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.extractor.comment_prefixes == ("#", "!")
        assert settings.extractor.line_continuation is True
        assert settings.output.width == 120

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DotpropsSettings.from_cli(cwd=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_discovered_file(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text(
            '[extractor]\ncomment_prefixes = [";"]\nline_continuation = false\n'
        )
        settings = DotpropsSettings.from_cli(cwd=tmp_path)
        assert settings.config_path == tmp_path / CONFIG_FILENAME
        assert settings.extractor.comment_prefixes == (";",)
        assert settings.extractor.line_continuation is False
        assert settings.output.width == 120  # default preserved

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "my.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text("[output]\nwidth = 80\n")
        settings = DotpropsSettings.from_cli(config_path=str(custom))
        assert settings.output.width == 80
        assert settings.config_path == custom

    def test_missing_explicit_path_uses_defaults(self, tmp_path: Path) -> None:
        settings = DotpropsSettings.from_cli(config_path=str(tmp_path / "nope.toml"))
        assert settings.config_path is None
        assert settings.output.width == 120

    def test_invalid_toml(self, tmp_path: Path) -> None:
        bad = tmp_path / "bad.toml"
        bad.write_text("[extractor\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DotpropsSettings.from_cli(config_path=str(bad))


class TestPriority:
    def test_cli_flags(self, tmp_path: Path) -> None:
        settings = DotpropsSettings.from_cli(cwd=tmp_path, json_output=True, verbose=True)
        assert settings.json_output is True
        assert settings.verbose is True

    def test_env_overrides_toml(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("quiet = false\n")
        monkeypatch.setenv("DOTPROPS_QUIET", "true")
        settings = DotpropsSettings.from_cli(cwd=tmp_path)
        assert settings.quiet is True

    def test_cli_flags_override_toml(self, tmp_path: Path) -> None:
        (tmp_path / CONFIG_FILENAME).write_text("json_output = true\n")
        settings = DotpropsSettings.from_cli(cwd=tmp_path, json_output=False)
        assert settings.json_output is False
