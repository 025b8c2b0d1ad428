"""Technology tag rules — display lookup and filter-control selection."""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping

from folioctl.domain.models import Domain, Technology

# Neutral accent used when a technology has no color of its own.
DEFAULT_TECH_COLOR = "#8b949e"


def resolve_technology(tech_id: str, technologies: Mapping[str, Technology]) -> Technology:
    """Look up display metadata for *tech_id*.

    A miss is not an error: the raw id becomes the display name and the
    color is left unset.

    Examples:
        >>> resolve_technology("zig", {}).name
        'zig'
    """
    found = technologies.get(tech_id)
    if found is not None:
        return found
    return Technology(name=tech_id)


def technology_color(technology: Technology) -> str:
    """Accent color for a technology, falling back to the neutral default."""
    return technology.color or DEFAULT_TECH_COLOR


def all_technologies(domains: Iterable[Domain]) -> list[str]:
    """Sorted unique technology ids across *domains*."""
    return sorted({tech for domain in domains for tech in domain.technologies})


def common_technologies(
    domains: Iterable[Domain],
    *,
    min_domains: int = 2,
    limit: int = 12,
) -> list[str]:
    """Pick the technologies that get a filter control.

    Counts how many domains use each id, keeps ids used by at least
    *min_domains* domains, and returns the *limit* most used. Ties keep
    first-seen order.
    """
    counts: Counter[str] = Counter()
    first_seen: dict[str, int] = {}
    for domain in domains:
        counts.update(domain.technology_set)
        for tech in domain.technologies:
            first_seen.setdefault(tech, len(first_seen))
    ranked = [tech for tech, count in counts.items() if count >= min_domains]
    ranked.sort(key=lambda tech: (-counts[tech], first_seen.get(tech, 0)))
    return ranked[:limit]
