"""Exception hierarchy for linksync."""

from __future__ import annotations

from typing import Any


class LinkSyncError(Exception):
    """Base exception for all linksync errors."""


class ConfigError(LinkSyncError):
    """Configuration loading or validation failure."""


class CatalogLoadError(LinkSyncError):
    """Link catalog loading/parsing failure."""


class AuthenticationError(LinkSyncError):
    """API key could not be resolved."""


class ServiceError(LinkSyncError):
    """Remote link service call failure.

    Every transport failure, rejected request and malformed response surfaces
    as this one error kind, whatever shape the service used to report it.
    """

    def __init__(self, message: str, *, status_code: int | None = None, payload: Any = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code
        self.payload = payload
