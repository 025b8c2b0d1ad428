"""BaseService — shared construction for catalog-backed services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from folioctl.config.settings import FolioSettings
    from folioctl.data.catalog import Catalog


class BaseService:
    """Base for service-layer classes.

    Every service receives the catalog and the resolved settings at
    construction time and reads nothing from module globals.
    """

    def __init__(self, catalog: Catalog, settings: FolioSettings) -> None:
        self._catalog = catalog
        self._settings = settings
