"""Pydantic configuration models with code-baked defaults.

Sparse TOML contract: defaults baked here, folioctl.toml only contains overrides.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

# --- folioctl.toml sections ---


class SiteConfig(BaseModel):
    """[site] section."""

    model_config = {"frozen": True}

    title: str = "Portfolio"
    author: str = "Parker Mossman"
    repo_base: str = "https://github.com/airbytehq/airbyte-platform"
    listing_page: str = "domains.html"
    detail_dir: str = "domain"
    project_dir: str = "project"


class ListingConfig(BaseModel):
    """[listing] section."""

    model_config = {"frozen": True}

    debounce_ms: int = Field(default=150, ge=0)
    filter_min_domains: int = Field(default=2, ge=1)
    filter_max_tags: int = Field(default=12, ge=0)
    card_highlights: int = Field(default=2, ge=0)
    card_badges: int = Field(default=4, ge=0)


class DetailConfig(BaseModel):
    """[detail] section."""

    model_config = {"frozen": True}

    related_limit: int = Field(default=3, ge=0)
    snippet_length: int = Field(default=80, ge=1)
    short_hash_length: int = Field(default=7, ge=1)


class FolioConfig(BaseModel):
    """Root configuration composing all sections."""

    model_config = {"frozen": True}

    site: SiteConfig = Field(default_factory=SiteConfig)
    listing: ListingConfig = Field(default_factory=ListingConfig)
    detail: DetailConfig = Field(default_factory=DetailConfig)
