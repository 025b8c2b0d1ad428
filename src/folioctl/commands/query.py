"""Command group: listing, lookup, and related-domain queries."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from folioctl.commands._base import FolioGroup
from folioctl.domain.types import SortKey
from folioctl.services.query import QueryService

if TYPE_CHECKING:
    from folioctl.commands._context import AppContext

_QUERY_EXAMPLES = """\
  folioctl query list --tech java --tech kotlin
  folioctl query list --sort alpha --search billing
  folioctl query get sso
  folioctl query related permissions --limit 5
  folioctl query techs"""

SORT_CHOICES = click.Choice([str(k) for k in SortKey], case_sensitive=False)


@click.group(cls=FolioGroup, examples=_QUERY_EXAMPLES)
@click.pass_obj
def query(app: AppContext) -> None:
    """List, search, and inspect portfolio domains."""


@query.command(
    name="list",
    examples="""\
  folioctl query list
  folioctl query list --tech java --tech kotlin
  folioctl query list --sort recent
  folioctl query list --search "single sign-on"
  folioctl query list --url "domains.html?tech=java&sort=alpha"
  folioctl -q query list --tech micronaut""",
)
@click.option("--tech", "techs", multiple=True, help="Require a technology (repeatable).")
@click.option("--sort", type=SORT_CHOICES, default=None, help="Sort mode.")
@click.option("--search", default=None, help="Free-text search.")
@click.option("--url", default=None, help="Seed state from a listing URL or query string.")
@click.pass_obj
def list_cmd(
    app: AppContext,
    techs: tuple[str, ...],
    sort: str | None,
    search: str | None,
    url: str | None,
) -> None:
    """List domains, filtered by technologies and search text."""
    svc = QueryService(app.catalog, app.settings)
    app.emit(svc.list_domains(techs=techs, sort=sort, search=search, url=url))


@query.command(
    examples="""\
  folioctl query get sso
  folioctl query get domain/billing.html
  folioctl --json query get permissions"""
)
@click.argument("ref")
@click.pass_obj
def get(app: AppContext, ref: str) -> None:
    """Show one domain by id or detail-page path."""
    app.emit(QueryService(app.catalog, app.settings).get_domain(ref))


@query.command(
    examples="""\
  folioctl query related sso
  folioctl query related billing --limit 5"""
)
@click.argument("domain_id")
@click.option("--limit", default=None, type=click.IntRange(min=0), help="Max results.")
@click.pass_obj
def related(app: AppContext, domain_id: str, limit: int | None) -> None:
    """Domains sharing the most technologies with DOMAIN_ID."""
    app.emit(QueryService(app.catalog, app.settings).related(domain_id, limit=limit))


@query.command(
    examples="""\
  folioctl query techs
  folioctl --json query techs"""
)
@click.pass_obj
def techs(app: AppContext) -> None:
    """List technologies with usage counts and filter eligibility."""
    app.emit(QueryService(app.catalog, app.settings).list_technologies())
