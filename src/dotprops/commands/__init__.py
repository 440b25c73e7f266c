"""Subcommand modules for dotprops.

Provides register_commands() which uses deferred imports to keep
``dotprops --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from dotprops.commands.decode import decode
    from dotprops.commands.keys import keys

    cli.add_command(keys)
    cli.add_command(decode)
