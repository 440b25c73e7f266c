"""Command: list the flat entries extracted from a properties file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click
import structlog

from dotprops.commands._base import DotpropsCommand
from dotprops.domain.entries import KEY_SEPARATOR
from dotprops.errors import MalformedInputError
from dotprops.extractor import extract_entries
from dotprops.output.result import CommandError, CommandResult

if TYPE_CHECKING:
    from dotprops.commands._context import AppContext
    from dotprops.config.models import ExtractorConfig


def list_keys(path: Path, *, prefix: str | None, config: ExtractorConfig) -> CommandResult:
    """Extract *path* and report its entries, optionally only those under *prefix*."""
    try:
        with structlog.contextvars.bound_contextvars(path=str(path)):
            entries = extract_entries(path.read_bytes(), config)
    except MalformedInputError as exc:
        return CommandResult(
            ok=False,
            op="keys",
            error=CommandError(code="MALFORMED_INPUT", message=str(exc), detail={"path": str(path)}),
        )

    if prefix:
        below = f"{prefix}{KEY_SEPARATOR}"
        entries = [e for e in entries if e.key == prefix or e.key.startswith(below)]

    return CommandResult(
        ok=True,
        op="keys",
        data={
            "path": str(path),
            "count": len(entries),
            "entries": {e.key: e.value for e in entries},
        },
    )


@click.command(
    cls=DotpropsCommand,
    examples="""\
  dotprops keys app.properties
  dotprops keys app.properties --prefix database
  dotprops --json keys app.properties""",
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--prefix", default=None, help="Only show keys at or below this dotted prefix.")
@click.pass_obj
def keys(app: AppContext, file: Path, prefix: str | None) -> None:
    """Show the key/value entries extracted from FILE."""
    app.emit(list_keys(file, prefix=prefix, config=app.settings.extractor))
