"""Command group: encode and decode listing-page URL state."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioGroup
from folioctl.commands.query import SORT_CHOICES
from folioctl.services.query import QueryService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_URL_EXAMPLES = """\
  folioctl url encode --tech java --sort alpha --search sso
  folioctl url decode "?tech=kotlin,java&q=billing\""""


@click.group(cls=FolioGroup, examples=_URL_EXAMPLES)
@click.pass_obj
def url(app: AppContext) -> None:
    """Translate between listing state and its query string."""


@url.command(
    examples="""\
  folioctl url encode --tech java --tech kotlin
  folioctl -q url encode --sort recent"""
)
@click.option("--tech", "techs", multiple=True, help="Selected technology (repeatable).")
@click.option("--sort", type=SORT_CHOICES, default=None, help="Sort mode.")
@click.option("--search", default=None, help="Free-text search.")
@click.pass_obj
def encode(
    app: AppContext,
    techs: tuple[str, ...],
    sort: str | None,
    search: str | None,
) -> None:
    """Build the query string for a listing state."""
    svc = QueryService(app.catalog, app.settings)
    app.emit(svc.encode_state(techs=techs, sort=sort, search=search))


@url.command(
    examples="""\
  folioctl url decode "tech=java,kotlin&sort=alpha"
  folioctl --json url decode "domains.html?q=sso\""""
)
@click.argument("query_string")
@click.pass_obj
def decode(app: AppContext, query_string: str) -> None:
    """Parse a query string (or listing URL) into listing state."""
    app.emit(QueryService(app.catalog, app.settings).decode_state(query_string))
