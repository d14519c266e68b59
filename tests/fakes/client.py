"""In-memory link client fake for engine and SDK tests."""

from __future__ import annotations

from linksync.contracts.client import LinkClient
from linksync.contracts.exceptions import ServiceError
from linksync.contracts.link import CreateLinkInput, Domain, RemoteLink, UpdateLinkInput


class FakeLinkClient(LinkClient):
    """In-memory link service with deterministic ids and spy tracking."""

    def __init__(self, domains: dict[str, int] | None = None) -> None:
        self.domains: dict[str, int] = dict(domains or {"go.example.com": 7})
        self.links: dict[str, RemoteLink] = {}
        self._next_number = 1
        self._cache: dict[str, int] = {}

        self.enter_calls = 0
        self.exit_calls = 0
        self.list_domain_calls = 0
        self.fetch_calls: list[str] = []
        self.create_calls: list[CreateLinkInput] = []
        self.update_calls: list[tuple[str, UpdateLinkInput]] = []
        self.delete_calls: list[str] = []
        self.failures: dict[tuple[str, str], ServiceError] = {}

    def fail(self, operation: str, target: str, message: str = "boom", status_code: int | None = 400) -> None:
        """Make *operation* fail for *target* (a ``domain/path`` identity or link id)."""
        self.failures[(operation, target)] = ServiceError(message, status_code=status_code)

    def seed(
        self,
        path: str,
        url: str,
        *,
        domain: str = "go.example.com",
        title: str | None = None,
        tags: list[str] | None = None,
    ) -> RemoteLink:
        link = RemoteLink(
            id=self._new_id(),
            original_url=url,
            path=path,
            domain=domain,
            domain_id=self.domains[domain],
            title=title,
            tags=tags,
        )
        self.links[link.id] = link
        return link

    async def __aenter__(self) -> FakeLinkClient:
        self.enter_calls += 1
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:  # type: ignore[override]
        self.exit_calls += 1

    async def list_domains(self) -> list[Domain]:
        self.list_domain_calls += 1
        self._cache = dict(self.domains)
        return [Domain(id=domain_id, hostname=hostname) for hostname, domain_id in self.domains.items()]

    async def resolve_domain_id(self, hostname: str) -> int:
        if hostname not in self._cache:
            await self.list_domains()
        if hostname not in self._cache:
            raise ServiceError(f"Domain not found: {hostname}")
        return self._cache[hostname]

    async def fetch_all_links(self, domain: str) -> list[RemoteLink]:
        self.fetch_calls.append(domain)
        self._raise_if_failing("fetch", domain)
        await self.resolve_domain_id(domain)
        return [link for link in self.links.values() if link.domain == domain]

    async def create_link(self, input: CreateLinkInput) -> RemoteLink:
        self.create_calls.append(input)
        self._raise_if_failing("create", f"{input.domain}/{input.path}")
        for link in self.links.values():
            if link.domain == input.domain and link.path == input.path:
                raise ServiceError("Link already exists", status_code=409)
        link = RemoteLink(
            id=self._new_id(),
            original_url=input.original_url,
            path=input.path,
            domain=input.domain,
            domain_id=self.domains[input.domain],
            title=input.title,
            tags=input.tags,
        )
        self.links[link.id] = link
        return link

    async def update_link(self, link_id: str, input: UpdateLinkInput) -> RemoteLink:
        self.update_calls.append((link_id, input))
        self._raise_if_failing("update", link_id)
        link = self.links.get(link_id)
        if link is None:
            raise ServiceError(f"Link not found: {link_id}", status_code=404)
        changes = input.model_dump(exclude_none=True)
        updated = link.model_copy(update=changes)
        self.links[link_id] = updated
        return updated

    async def delete_link(self, link_id: str) -> None:
        self.delete_calls.append(link_id)
        self._raise_if_failing("delete", link_id)
        if link_id not in self.links:
            raise ServiceError(f"Link not found: {link_id}", status_code=404)
        del self.links[link_id]

    def _new_id(self) -> str:
        link_id = f"lnk_{self._next_number}"
        self._next_number += 1
        return link_id

    def _raise_if_failing(self, operation: str, target: str) -> None:
        error = self.failures.get((operation, target))
        if error is not None:
            raise error
