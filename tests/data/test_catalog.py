"""Tests for the Catalog and the bundled portfolio."""

from __future__ import annotations

import pytest

from folioctl.data.catalog import Catalog, load_catalog
from folioctl.data.portfolio import DOMAINS, PROJECTS, REPO_BASE


class TestCatalog:
    def test_preserves_dataset_order(self, catalog: Catalog) -> None:
        assert [d.id for d in catalog.domains] == ["sso", "billing", "permissions"]

    def test_get_domain(self, catalog: Catalog) -> None:
        domain = catalog.get_domain("billing")
        assert domain is not None
        assert domain.commit_count == 31
        assert catalog.get_domain("nope") is None

    def test_duplicate_id_rejected(self, catalog: Catalog) -> None:
        with pytest.raises(ValueError, match="Duplicate domain id: sso"):
            Catalog([*catalog.domains, catalog.domains[0]], catalog.technologies)

    def test_technologies_read_only(self, catalog: Catalog) -> None:
        with pytest.raises(TypeError):
            catalog.technologies["go"] = catalog.technologies["java"]  # type: ignore[index]

    def test_projects_for_domain(self, catalog: Catalog) -> None:
        assert [p.id for p in catalog.get_projects_for_domain("sso")] == [
            "sso-rollout",
            "rbac-rewrite",
        ]
        assert catalog.get_projects_for_domain("billing") == []

    def test_domains_by_technology(self, catalog: Catalog) -> None:
        assert [d.id for d in catalog.domains_by_technology("java")] == ["sso", "permissions"]

    def test_commit_url(self) -> None:
        c = Catalog([], {}, repo_base="https://example.test/repo/")
        assert c.commit_url("abc") == "https://example.test/repo/commit/abc"

    def test_format_period(self, catalog: Catalog) -> None:
        assert catalog.format_period(catalog.domains[0].period) == "Jan 2023 - Present"


class TestCanonicalOrderings:
    def test_by_commits(self, catalog: Catalog) -> None:
        assert [d.id for d in catalog.sort_by_commits()] == ["sso", "permissions", "billing"]

    def test_by_recency(self, catalog: Catalog) -> None:
        assert [d.id for d in catalog.sort_by_recency()] == ["sso", "permissions", "billing"]

    def test_alphabetically(self, catalog: Catalog) -> None:
        assert [d.id for d in catalog.sort_alphabetically()] == [
            "billing",
            "permissions",
            "sso",
        ]

    def test_orderings_do_not_mutate(self, catalog: Catalog) -> None:
        before = catalog.domains
        catalog.sort_alphabetically()
        assert catalog.domains == before


class TestBundledPortfolio:
    def test_loads_every_record(self) -> None:
        c = load_catalog()
        assert len(c.domains) == len(DOMAINS)
        assert len(c.projects) == len(PROJECTS)
        assert c.repo_base == REPO_BASE

    def test_repo_base_override(self) -> None:
        c = load_catalog("https://mirror.test/repo")
        assert c.commit_url("abc").startswith("https://mirror.test/repo/commit/")

    def test_project_domains_exist(self) -> None:
        c = load_catalog()
        for project in c.projects:
            for domain_id in project.domains:
                assert c.get_domain(domain_id) is not None, (project.id, domain_id)

    def test_technology_ids_have_metadata(self) -> None:
        c = load_catalog()
        missing = [t for t in c.all_technologies() if t not in c.technologies]
        assert missing == []
