"""SDK composition root for linksync."""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from linksync.auth import create_token_resolver
from linksync.catalog import LinkCatalogLoader
from linksync.contracts.client import LinkClient
from linksync.contracts.config import LinkSyncConfig
from linksync.contracts.exceptions import ConfigError
from linksync.contracts.link import DesiredLink, RemoteLink
from linksync.contracts.sync import SyncResult
from linksync.engine import SyncExecutor, compute_diff
from linksync.engine.progress import NullSyncProgress, SyncProgress
from linksync.providers import create_client

_LOG = logging.getLogger(__name__)


def _resolve_path(value: Path, *, base_dir: Path) -> Path:
    if value.is_absolute():
        return value
    return (base_dir / value).resolve()


def load_config(path: str | Path) -> LinkSyncConfig:
    """Load and validate config from JSON, resolving the catalog path against the config directory."""
    config_path = Path(path).expanduser().resolve()

    try:
        raw_payload: Any = json.loads(config_path.read_text(encoding="utf-8"))
        parsed = LinkSyncConfig.model_validate(raw_payload)
    except OSError as exc:
        raise ConfigError(f"failed reading config file: {config_path}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigError(f"invalid JSON in config file: {config_path}") from exc
    except ValidationError as exc:
        raise ConfigError(f"invalid config: {exc}") from exc

    return parsed.model_copy(
        update={"catalog_path": _resolve_path(parsed.catalog_path, base_dir=config_path.parent)}
    )


def load_catalog(path: str | Path) -> list[DesiredLink]:
    """Load desired links from a YAML catalog file."""
    return LinkCatalogLoader().load(Path(path))


def managed_domains(desired: Iterable[DesiredLink], extra: Iterable[str] = ()) -> list[str]:
    """Domains whose remote catalogs take part in a run."""
    return sorted({link.domain for link in desired}.union(extra))


class LinkSync:
    """linksync SDK public API."""

    def __init__(
        self,
        *,
        config: LinkSyncConfig,
        client: LinkClient | None = None,
        progress: SyncProgress | None = None,
    ) -> None:
        self._config = config
        self._client = client
        self._progress: SyncProgress = progress or NullSyncProgress()

    @classmethod
    async def from_config(cls, config: LinkSyncConfig, *, progress: SyncProgress | None = None) -> LinkSync:
        return cls(config=config, progress=progress)

    async def sync(self, desired: Sequence[DesiredLink] | None = None, *, dry_run: bool = False) -> SyncResult:
        links = list(desired) if desired is not None else load_catalog(self._config.catalog_path)
        domains = managed_domains(links, self._config.managed_domains)

        client = self._client if self._client is not None else await self._resolve_client()
        async with client:
            actual = await self._discover(client, domains)
            plan = compute_diff(links, actual)
            _LOG.debug(
                "Plan: %d create, %d update, %d delete",
                len(plan.to_create),
                len(plan.to_update),
                len(plan.to_delete),
            )
            if dry_run:
                return SyncResult(plan=plan, domains=domains, dry_run=True)

            executor = SyncExecutor(client, max_concurrent=self._config.max_concurrent, progress=self._progress)
            outcome = await executor.apply(plan)

        return SyncResult(plan=plan, outcome=outcome, domains=domains, dry_run=False)

    async def _discover(self, client: LinkClient, domains: list[str]) -> list[RemoteLink]:
        self._progress.phase_start("Discover", total=len(domains))
        actual: list[RemoteLink] = []
        try:
            for domain in domains:
                actual.extend(await client.fetch_all_links(domain))
                self._progress.item_done("Discover")
        except BaseException as exc:
            self._progress.phase_error("Discover", exc)
            raise
        self._progress.phase_done("Discover")
        return actual

    async def _resolve_client(self) -> LinkClient:
        token = await create_token_resolver(self._config).resolve()
        try:
            return create_client(self._config.provider, api_key=token, base_url=self._config.base_url)
        except ValueError as exc:
            raise ConfigError(str(exc)) from exc
