"""Standalone command: render the portfolio as static HTML."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioCommand
from folioctl.services.site import SiteService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext


@click.command(
    cls=FolioCommand,
    examples="""\
  folioctl build --output site
  folioctl build --output site --url "?tech=java&sort=recent"
  folioctl -v build --output /tmp/portfolio""",
)
@click.option(
    "--output",
    "output_dir",
    required=True,
    type=click.Path(file_okay=False),
    help="Output directory.",
)
@click.option("--url", default=None, help="Initial listing state as a URL or query string.")
@click.pass_obj
def build(app: AppContext, output_dir: str, url: str | None) -> None:
    """Write the listing page and every domain page to OUTPUT."""
    app.emit(SiteService(app.catalog, app.settings).build(Path(output_dir), url=url))
