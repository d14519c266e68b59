"""Link catalog loading from YAML files."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, ValidationError

from linksync.contracts.exceptions import CatalogLoadError
from linksync.contracts.link import DesiredLink


class CatalogEntry(BaseModel):
    url: str
    domain: str
    title: str | None = None
    tags: list[str] | None = None

    model_config = ConfigDict(extra="forbid")


class LinkCatalogLoader:
    """Load a ``links:`` catalog into desired links, one per key."""

    def load(self, path: Path) -> list[DesiredLink]:
        payload = self._read_yaml(path)
        if payload is None:
            return []
        if not isinstance(payload, dict):
            raise CatalogLoadError(f"catalog root must be a mapping: {path}")
        return self.from_mapping(payload.get("links"), source=path)

    def from_mapping(self, links: Any, *, source: Path | str = "<memory>") -> list[DesiredLink]:
        if links is None:
            return []
        if not isinstance(links, dict):
            raise CatalogLoadError(f"'links' must be a mapping of key to link: {source}")

        desired: list[DesiredLink] = []
        for raw_key, raw_value in links.items():
            key = str(raw_key)
            if not isinstance(raw_value, dict):
                raise CatalogLoadError(f"link '{key}' must be a mapping: {source}")
            try:
                entry = CatalogEntry.model_validate(raw_value)
            except ValidationError as exc:
                raise CatalogLoadError(f"invalid link '{key}' in {source}: {exc}") from exc
            desired.append(DesiredLink(key=key, **entry.model_dump()))
        return desired

    @staticmethod
    def _read_yaml(path: Path) -> Any:
        if not path.exists():
            raise CatalogLoadError(f"catalog file not found: {path}")
        if not path.is_file():
            raise CatalogLoadError(f"catalog path is not a file: {path}")
        try:
            return yaml.safe_load(path.read_text(encoding="utf-8"))
        except OSError as exc:
            raise CatalogLoadError(f"failed reading catalog file: {path}") from exc
        except yaml.YAMLError as exc:
            raise CatalogLoadError(f"invalid YAML in catalog file: {path}") from exc
