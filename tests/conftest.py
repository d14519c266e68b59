"""Shared test fixtures for linksync tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from linksync.contracts.config import LinkSyncConfig
from linksync.contracts.link import DesiredLink, RemoteLink


@pytest.fixture
def sample_desired() -> DesiredLink:
    """A minimal valid desired link."""
    return DesiredLink(key="docs", url="https://example.com/docs", domain="go.example.com", title="Docs")


@pytest.fixture
def sample_remote() -> RemoteLink:
    """A remote link matching ``sample_desired``."""
    return RemoteLink(
        id="lnk_1",
        original_url="https://example.com/docs",
        path="docs",
        domain="go.example.com",
        domain_id=7,
        title="Docs",
    )


@pytest.fixture
def catalog_path(tmp_path: Path) -> Path:
    """A two-link YAML catalog on disk."""
    path = tmp_path / "links.yaml"
    path.write_text(
        "\n".join(
            [
                "links:",
                "  docs:",
                "    url: https://example.com/docs",
                "    domain: go.example.com",
                "    title: Docs",
                "    tags: [internal, docs]",
                "  blog:",
                "    url: https://example.com/blog",
                "    domain: go.example.com",
                "",
            ]
        ),
        encoding="utf-8",
    )
    return path


@pytest.fixture
def sample_config(catalog_path: Path) -> LinkSyncConfig:
    """A minimal valid LinkSyncConfig using a static token."""
    return LinkSyncConfig(catalog_path=catalog_path, auth="token", token="key-123")
