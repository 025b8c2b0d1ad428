"""Related-domain ranking by shared technologies.

Every other domain is a candidate. Candidates are ordered by overlap,
highest first, with dataset order breaking ties. Zero-overlap domains are
ranked last but never dropped, so a small catalog always yields suggestions.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from folioctl.domain.models import Domain


@dataclass(frozen=True)
class RelatedDomain:
    """A candidate domain and its overlap with the reference domain."""

    domain: Domain
    overlap: int


def overlap_score(a: Domain, b: Domain) -> int:
    """Count of technology ids shared by *a* and *b* (set semantics)."""
    return len(a.technology_set & b.technology_set)


def related_to(
    record: Domain,
    domains: Iterable[Domain],
    *,
    exclude_self: bool = True,
    limit: int = 3,
) -> list[RelatedDomain]:
    """Rank *domains* by technology overlap with *record*.

    Args:
        record: The reference domain.
        domains: Candidate pool in dataset order.
        exclude_self: Skip candidates sharing *record*'s id.
        limit: Maximum number of results.
    """
    scored = [
        RelatedDomain(domain=candidate, overlap=overlap_score(record, candidate))
        for candidate in domains
        if not (exclude_self and candidate.id == record.id)
    ]
    scored.sort(key=lambda r: r.overlap, reverse=True)
    return scored[: max(limit, 0)]
