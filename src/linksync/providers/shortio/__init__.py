"""Short.io client package."""

from linksync.providers.shortio.client import PAGE_SIZE, LinkPageState, ShortioClient

__all__ = ["PAGE_SIZE", "LinkPageState", "ShortioClient"]
