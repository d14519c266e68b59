"""Link contracts shared by the catalog, the client and the engine."""

from __future__ import annotations

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


@dataclass(frozen=True)
class LinkIdentity:
    """Join key between desired and remote links."""

    domain: str
    path: str

    def __str__(self) -> str:
        return f"{self.domain}/{self.path}"


class Domain(BaseModel):
    id: int
    hostname: str

    model_config = ConfigDict(frozen=True)


class DesiredLink(BaseModel):
    """One catalog entry: the link as it should exist remotely."""

    key: str
    url: str
    domain: str
    title: str | None = None
    tags: list[str] | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def identity(self) -> LinkIdentity:
        return LinkIdentity(domain=self.domain, path=self.key)


class RemoteLink(BaseModel):
    """A link as reported by the service."""

    id: str
    original_url: str
    path: str
    domain: str
    domain_id: int
    title: str | None = None
    tags: list[str] | None = None

    model_config = ConfigDict(frozen=True)

    @property
    def identity(self) -> LinkIdentity:
        return LinkIdentity(domain=self.domain, path=self.path)


class CreateLinkInput(BaseModel):
    original_url: str
    domain: str
    path: str
    title: str | None = None
    tags: list[str] | None = None

    @classmethod
    def from_desired(cls, desired: DesiredLink) -> CreateLinkInput:
        return cls(
            original_url=desired.url,
            domain=desired.domain,
            path=desired.key,
            title=desired.title,
            tags=list(desired.tags) if desired.tags is not None else None,
        )


class UpdateLinkInput(BaseModel):
    """Partial update; ``None`` means "leave unchanged", empty values clear."""

    original_url: str | None = None
    title: str | None = None
    tags: list[str] | None = None
