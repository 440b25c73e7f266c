"""Shared pytest fixtures and test helpers for dotprops tests."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def write_properties(tmp_path: Path):
    """Write properties text to a temp file and return its path."""

    def _write(text: str, name: str = "app.properties") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write


@pytest.fixture(autouse=True)
def _isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's dotprops.toml or DOTPROPS_* env out of the tests."""
    monkeypatch.delenv("DOTPROPS_CONFIG", raising=False)
    for name in ("DOTPROPS_JSON_OUTPUT", "DOTPROPS_VERBOSE", "DOTPROPS_QUIET", "DOTPROPS_LOG_JSON"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Iterator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    pkg = logging.getLogger("dotprops")
    pkg_level = pkg.level
    yield
    root.handlers = handlers
    root.setLevel(level)
    pkg.setLevel(pkg_level)
