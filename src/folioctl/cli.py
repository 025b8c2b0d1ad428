"""``folioctl`` entry point.

The root group resolves settings once per invocation (``--config`` or a
discovered ``folioctl.toml``, then ``FOLIOCTL_*`` env vars, then these
flags) and hands subcommands an :class:`AppContext` that loads the bundled
catalog on first use. ``--json`` and ``-q`` pick the stdout format for
every subcommand. ``-v`` adds detail columns and DEBUG logs; ``--log-json``
only changes how stderr logs are rendered.
"""

from __future__ import annotations

import click

from folioctl import __version__
from folioctl.commands import register_commands
from folioctl.commands._context import AppContext
from folioctl.config.settings import FolioSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="folioctl")
@click.option("--json", "json_output", is_flag=True, help="Print the raw result as JSON.")
@click.option("-q", "--quiet", is_flag=True, help="Print ids (or the query string) only.")
@click.option("-v", "--verbose", is_flag=True, help="Extra columns and DEBUG logging.")
@click.option("--log-json", is_flag=True, help="Log to stderr as JSON lines.")
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Use this folioctl.toml instead of searching for one.",
)
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Query the portfolio catalog, encode listing URLs, and build the site.

    Run with no subcommand to print this help.
    """
    ctx.ensure_object(dict)
    settings = FolioSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
