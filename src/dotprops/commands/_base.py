"""Command base class for dotprops subcommands.

Each command can carry a block of sample invocations. ``--examples``
prints that block and exits before FILE or ``--target`` are checked, so
``dotprops decode --examples`` works without any arguments.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click


def _show_examples(examples: str) -> Callable[[click.Context, click.Parameter, bool], None]:
    def callback(ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        click.echo(examples)
        ctx.exit(0)

    return callback


class DotpropsCommand(click.Command):
    """click.Command that accepts an ``examples=`` text and exposes ``--examples``."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = examples
        if examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=_show_examples(examples),
                    help="Show sample invocations and exit.",
                )
            )
