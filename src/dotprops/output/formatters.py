"""Rich/JSON output helpers.

The CLI renders CommandResult for humans (Rich tables and colors) or
machines (--json).
"""

from __future__ import annotations

import json as _json
from typing import Any

from pydantic import BaseModel
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dotprops.output.console import create_console, get_output
from dotprops.output.result import CommandResult


class OutputSettings(BaseModel):
    """Rendering switches derived from global CLI flags."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    width: int = 120


def _mapping_table(title: str, mapping: dict[str, Any]) -> Table:
    table = Table(title=title, show_header=True, header_style="dp.op")
    table.add_column("Key", style="dp.key")
    table.add_column("Value", style="dp.value")
    for key, value in mapping.items():
        if isinstance(value, (dict, list)):
            value = _json.dumps(value, separators=(",", ":"))
        table.add_row(escape(str(key)), escape(str(value)))
    return table


def _render_data(console: Console, data: dict[str, Any]) -> None:
    for key, value in data.items():
        if isinstance(value, dict):
            console.print(_mapping_table(key, value))
        elif isinstance(value, list):
            rendered = ", ".join(str(v) for v in value) or "-"
            console.print(f"  [dp.key]{escape(key)}[/]: {escape(rendered)}")
        else:
            console.print(f"  [dp.key]{escape(key)}[/]: {escape(str(value))}")


def _render_field_errors(console: Console, errors: list[dict[str, Any]]) -> None:
    table = Table(show_header=True, header_style="dp.error")
    table.add_column("Key", style="dp.key")
    table.add_column("Code", style="dp.code")
    table.add_column("Message")
    for err in errors:
        table.add_row(
            escape(str(err.get("key", ""))),
            escape(str(err.get("code", ""))),
            escape(str(err.get("message", ""))),
        )
    console.print(table)


def format_result(
    result: CommandResult,
    *,
    settings: OutputSettings | None = None,
    json_output: bool = False,
) -> str:
    """Format a CommandResult for display.

    Args:
        result: The command result to format.
        settings: Output switches; takes precedence over *json_output*.
        json_output: Shortcut for ``OutputSettings(json_output=True)``.
    """
    settings = settings or OutputSettings(json_output=json_output)
    if settings.json_output:
        return result.model_dump_json(indent=2)

    console = create_console(width=settings.width)
    if result.ok:
        console.print(f"[dp.ok]OK[/]: [dp.op]{result.op}[/]")
        if result.data and not settings.quiet:
            _render_data(console, result.data)
    else:
        message = result.error.message if result.error else "Unknown error"
        console.print(f"[dp.error]ERROR[/]: [dp.op]{result.op}[/] - {escape(message)}")
        field_errors = result.error.detail.get("errors") if result.error else None
        if field_errors:
            _render_field_errors(console, field_errors)
    return get_output(console).rstrip("\n")
