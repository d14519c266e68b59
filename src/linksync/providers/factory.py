"""Factory for creating link client instances."""

from __future__ import annotations

from linksync.contracts.client import LinkClient
from linksync.contracts.config import DEFAULT_BASE_URL
from linksync.providers.shortio import ShortioClient

CLIENTS: dict[str, type[LinkClient]] = {
    "shortio": ShortioClient,
}


def create_client(name: str, *, api_key: str, base_url: str = DEFAULT_BASE_URL) -> LinkClient:
    """Create a link client by name.

    The returned client is an async context manager::

        async with create_client("shortio", api_key=key) as client:
            links = await client.fetch_all_links("go.example.com")

    Raises:
        ValueError: If no client is registered under *name*.
    """
    client_cls = CLIENTS.get(name)
    if client_cls is None:
        available = ", ".join(sorted(CLIENTS))
        raise ValueError(f"Unknown provider: {name!r}. Available: {available}")
    return client_cls(api_key=api_key, base_url=base_url)
