"""Shared pytest fixtures for folioctl tests."""

from __future__ import annotations

import logging
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
from click.testing import CliRunner

from folioctl.config.settings import FolioSettings
from folioctl.data.catalog import Catalog
from folioctl.rendering.views import ProjectionContext

REPO = "https://example.test/repo"

MINI_DOMAINS: list[dict[str, Any]] = [
    {
        "id": "sso",
        "name": "Single Sign-On",
        "short_name": "SSO",
        "color": "#58a6ff",
        "commit_count": 49,
        "period": {"start": "2023-01", "end": "present"},
        "technologies": ["keycloak", "java"],
        "description": "Keycloak realms, identity provider configuration, and login flows.",
        "highlights": ["Realm per organization", "Domain verification", "Login redirects"],
        "key_commits": [
            {"hash": "abcdef123456", "message": "feat: realm per org", "date": "2024-02"},
        ],
    },
    {
        "id": "billing",
        "name": "Billing & Payments",
        "short_name": "Billing",
        "color": "#3fb950",
        "commit_count": 31,
        "period": {"start": "2022-06", "end": "2024-03"},
        "technologies": ["kotlin", "stripe"],
        "description": "Stripe subscriptions, invoices, and usage-based plans.",
        "highlights": ["Usage metering"],
        "key_commits": [],
    },
    {
        "id": "permissions",
        "name": "Permissions & RBAC",
        "short_name": "Permissions",
        "color": "#d29922",
        "commit_count": 34,
        "period": {"start": "2021-02", "end": "2025-10"},
        "technologies": ["java", "kotlin"],
        "description": "Role-based access control across workspaces and organizations.",
        "highlights": ["Role hierarchy", "Permission checks"],
        "key_commits": [
            {"hash": "0123456789ab", "message": "feat: role hierarchy", "date": "2023-05"},
            {"hash": "fedcba987654", "message": "fix: instance admin", "date": "2024-11"},
        ],
    },
]

MINI_TECHNOLOGIES: dict[str, dict[str, Any]] = {
    "java": {"name": "Java", "color": "#b07219"},
    "kotlin": {"name": "Kotlin", "color": "#A97BFF"},
    "keycloak": {"name": "Keycloak", "color": "#4d4d4d"},
}

MINI_PROJECTS: list[dict[str, Any]] = [
    {"id": "sso-rollout", "name": "SSO Rollout", "domains": ["sso"], "category": "auth"},
    {
        "id": "rbac-rewrite",
        "name": "RBAC Rewrite",
        "domains": ["permissions", "sso"],
        "category": "auth",
    },
]


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def catalog() -> Catalog:
    """Three-domain catalog: sso, billing, permissions (dataset order)."""
    return Catalog.from_records(
        MINI_DOMAINS, MINI_TECHNOLOGIES, MINI_PROJECTS, repo_base=REPO
    )


@pytest.fixture
def settings(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> FolioSettings:
    """Default settings rooted in an empty temp directory."""
    monkeypatch.delenv("FOLIOCTL_CONFIG", raising=False)
    return FolioSettings.from_cli(project_root=tmp_path)


@pytest.fixture
def ctx(catalog: Catalog, settings: FolioSettings) -> ProjectionContext:
    """Projection context over the mini catalog."""
    return ProjectionContext.from_catalog(catalog, settings)


@pytest.fixture
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run the CLI from an empty temp directory with no config override.

    Use via ``@pytest.mark.usefixtures("_isolated_cwd")`` on command test
    classes.
    """
    monkeypatch.delenv("FOLIOCTL_CONFIG", raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """Undo configure_logging() calls made by CLI invocations."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    folio = logging.getLogger("folioctl")
    folio_level = folio.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    folio.setLevel(folio_level)
