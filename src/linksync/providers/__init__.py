"""Link client implementations."""

from linksync.providers.factory import create_client

__all__ = ["create_client"]
