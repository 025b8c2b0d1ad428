"""View projector — domain records to display-ready view models.

Pure mapping: no filtering, sorting, or ranking happens here. Every field on
a view model is a primitive (or a list of view models) so any renderer can
consume it without touching the catalog.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from pydantic import BaseModel

from folioctl.data.icons import DOMAIN_ICONS, domain_icon
from folioctl.domain.models import Domain, KeyCommit, Period, Project, Technology
from folioctl.domain.periods import format_period as format_period_default
from folioctl.domain.state import QueryState
from folioctl.domain.tags import resolve_technology, technology_color

if TYPE_CHECKING:
    from folioctl.config.settings import FolioSettings
    from folioctl.data.catalog import Catalog
    from folioctl.services.related import RelatedDomain

# Two-hex-digit alpha appended to a domain color for its icon background.
ACCENT_ALPHA = "20"
ELLIPSIS = "..."


@dataclass(frozen=True)
class ProjectionContext:
    """Lookups and display limits the projector needs, passed explicitly."""

    technologies: Mapping[str, Technology]
    format_period: Callable[[Period], str] = format_period_default
    commit_url: Callable[[str], str] = lambda commit_hash: commit_hash
    icons: Mapping[str, str] = field(default_factory=lambda: DOMAIN_ICONS)
    author: str = ""
    detail_dir: str = "domain"
    project_dir: str = "project"
    card_highlights: int = 2
    card_badges: int = 4
    snippet_length: int = 80
    short_hash_length: int = 7

    @classmethod
    def from_catalog(cls, catalog: Catalog, settings: FolioSettings) -> ProjectionContext:
        return cls(
            technologies=catalog.technologies,
            format_period=catalog.format_period,
            commit_url=catalog.commit_url,
            author=settings.site.author,
            detail_dir=settings.site.detail_dir,
            project_dir=settings.site.project_dir,
            card_highlights=settings.listing.card_highlights,
            card_badges=settings.listing.card_badges,
            snippet_length=settings.detail.snippet_length,
            short_hash_length=settings.detail.short_hash_length,
        )


# ── View models ───────────────────────────────────────────────────────


class TechBadge(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    color: str


class FilterTag(BaseModel):
    """A technology toggle on the listing page."""

    model_config = {"frozen": True}

    id: str
    name: str
    color: str
    active: bool = False


class DomainCard(BaseModel):
    """One domain in the listing grid."""

    model_config = {"frozen": True}

    id: str
    href: str
    title: str
    short_name: str
    description: str
    color: str
    accent_background: str
    icon: str
    period: str
    commit_count: int
    highlights: list[str]
    badges: list[TechBadge]
    technologies: str


class CommitLine(BaseModel):
    model_config = {"frozen": True}

    hash: str
    short_hash: str
    url: str
    message: str
    date: str


class RelatedCard(BaseModel):
    model_config = {"frozen": True}

    id: str
    href: str
    title: str
    snippet: str
    overlap: int


class ProjectCard(BaseModel):
    model_config = {"frozen": True}

    id: str
    name: str
    href: str


class DomainDetail(BaseModel):
    """Everything the detail page shows for one domain."""

    model_config = {"frozen": True}

    id: str
    title: str
    page_title: str
    meta_description: str
    description: str
    color: str
    accent_background: str
    icon: str
    period: str
    commit_count: int
    badges: list[TechBadge]
    highlights: list[str]
    commits: list[CommitLine]
    related_domains: list[RelatedCard]
    related_projects: list[ProjectCard]
    show_related_projects: bool


class ListingPage(BaseModel):
    """The listing page after one pipeline run."""

    model_config = {"frozen": True}

    cards: list[DomainCard]
    count: int
    filter_tags: list[FilterTag]
    sort_key: str
    search_query: str
    show_clear: bool
    url: str


# ── Projection ────────────────────────────────────────────────────────


def snippet(text: str, length: int) -> str:
    """First *length* characters of *text*, with an ellipsis when cut."""
    if len(text) <= length:
        return text
    return text[:length].rstrip() + ELLIPSIS


def project_badges(
    tech_ids: Iterable[str],
    ctx: ProjectionContext,
    *,
    limit: int | None = None,
) -> list[TechBadge]:
    ids = list(tech_ids)
    if limit is not None:
        ids = ids[:limit]
    badges = []
    for tech_id in ids:
        tech = resolve_technology(tech_id, ctx.technologies)
        badges.append(TechBadge(id=tech_id, name=tech.name, color=technology_color(tech)))
    return badges


def project_filter_tags(
    tech_ids: Iterable[str],
    selected: Iterable[str],
    ctx: ProjectionContext,
) -> list[FilterTag]:
    active = set(selected)
    return [
        FilterTag(id=b.id, name=b.name, color=b.color, active=b.id in active)
        for b in project_badges(tech_ids, ctx)
    ]


def project_card(domain: Domain, ctx: ProjectionContext) -> DomainCard:
    return DomainCard(
        id=domain.id,
        href=f"{ctx.detail_dir}/{domain.id}.html",
        title=domain.name,
        short_name=domain.short_name,
        description=domain.description,
        color=domain.color,
        accent_background=f"{domain.color}{ACCENT_ALPHA}",
        icon=domain_icon(domain.id, ctx.icons),
        period=ctx.format_period(domain.period),
        commit_count=domain.commit_count,
        highlights=list(domain.highlights[: ctx.card_highlights]),
        badges=project_badges(domain.technologies, ctx, limit=ctx.card_badges),
        technologies=",".join(domain.technologies),
    )


def project_cards(domains: Iterable[Domain], ctx: ProjectionContext) -> list[DomainCard]:
    return [project_card(d, ctx) for d in domains]


def project_commit(commit: KeyCommit, ctx: ProjectionContext) -> CommitLine:
    return CommitLine(
        hash=commit.hash,
        short_hash=commit.hash[: ctx.short_hash_length],
        url=ctx.commit_url(commit.hash),
        message=commit.message,
        date=commit.date,
    )


def project_related(related: RelatedDomain, ctx: ProjectionContext) -> RelatedCard:
    domain = related.domain
    return RelatedCard(
        id=domain.id,
        href=f"{domain.id}.html",
        title=domain.short_name,
        snippet=snippet(domain.description, ctx.snippet_length),
        overlap=related.overlap,
    )


def project_project(project: Project, ctx: ProjectionContext) -> ProjectCard:
    return ProjectCard(
        id=project.id,
        name=project.name,
        href=f"../{ctx.project_dir}/{project.id}.html",
    )


def project_detail(
    domain: Domain,
    related: Iterable[RelatedDomain],
    projects: Iterable[Project],
    ctx: ProjectionContext,
) -> DomainDetail:
    """Project a domain plus its related domains and projects."""
    project_links = [project_project(p, ctx) for p in projects]
    page_title = f"{domain.name} | {ctx.author}" if ctx.author else domain.name
    return DomainDetail(
        id=domain.id,
        title=domain.name,
        page_title=page_title,
        meta_description=f"{domain.name} - {domain.description}",
        description=domain.description,
        color=domain.color,
        accent_background=f"{domain.color}{ACCENT_ALPHA}",
        icon=domain_icon(domain.id, ctx.icons),
        period=ctx.format_period(domain.period),
        commit_count=domain.commit_count,
        badges=project_badges(domain.technologies, ctx),
        highlights=list(domain.highlights),
        commits=[project_commit(c, ctx) for c in domain.key_commits],
        related_domains=[project_related(r, ctx) for r in related],
        related_projects=project_links,
        show_related_projects=bool(project_links),
    )


def project_listing(
    results: Iterable[Domain],
    state: QueryState,
    filter_tech_ids: Iterable[str],
    url: str,
    ctx: ProjectionContext,
) -> ListingPage:
    """Project one pipeline run for the listing page."""
    cards = project_cards(results, ctx)
    return ListingPage(
        cards=cards,
        count=len(cards),
        filter_tags=project_filter_tags(filter_tech_ids, state.selected_techs, ctx),
        sort_key=str(state.sort_key),
        search_query=state.search_query,
        show_clear=state.has_filters,
        url=url,
    )
