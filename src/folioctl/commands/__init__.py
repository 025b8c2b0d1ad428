"""Subcommand modules for folioctl.

Provides register_commands() which uses deferred imports to keep
``folioctl --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register the command groups and standalone commands on the root group."""
    # --- Groups ---
    from folioctl.commands.query import query
    from folioctl.commands.url import url

    cli.add_command(query)
    cli.add_command(url)

    # --- Standalone commands ---
    from folioctl.commands.build import build

    cli.add_command(build)
