"""Link catalog loading."""

from linksync.catalog.loader import CatalogEntry, LinkCatalogLoader

__all__ = ["CatalogEntry", "LinkCatalogLoader"]
