"""Dataset provider — the static portfolio catalog."""

from folioctl.data.catalog import Catalog, load_catalog

__all__ = ["Catalog", "load_catalog"]
