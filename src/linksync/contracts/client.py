"""Remote link client contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType

from linksync.contracts.link import CreateLinkInput, Domain, RemoteLink, UpdateLinkInput


class LinkClient(ABC):
    @abstractmethod
    async def __aenter__(self) -> LinkClient: ...  # pragma: no cover

    @abstractmethod
    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None: ...  # pragma: no cover

    @abstractmethod
    async def list_domains(self) -> list[Domain]: ...  # pragma: no cover

    @abstractmethod
    async def resolve_domain_id(self, hostname: str) -> int: ...  # pragma: no cover

    @abstractmethod
    async def fetch_all_links(self, domain: str) -> list[RemoteLink]: ...  # pragma: no cover

    @abstractmethod
    async def create_link(self, input: CreateLinkInput) -> RemoteLink: ...  # pragma: no cover

    @abstractmethod
    async def update_link(self, link_id: str, input: UpdateLinkInput) -> RemoteLink | None: ...  # pragma: no cover

    @abstractmethod
    async def delete_link(self, link_id: str) -> None: ...  # pragma: no cover
