"""Public contracts for linksync."""

from linksync.contracts.client import LinkClient
from linksync.contracts.config import DEFAULT_BASE_URL, LinkSyncConfig
from linksync.contracts.exceptions import (
    AuthenticationError,
    CatalogLoadError,
    ConfigError,
    LinkSyncError,
    ServiceError,
)
from linksync.contracts.link import (
    CreateLinkInput,
    DesiredLink,
    Domain,
    LinkIdentity,
    RemoteLink,
    UpdateLinkInput,
)
from linksync.contracts.sync import LinkUpdate, ReconciliationPlan, SyncOutcome, SyncResult

__all__ = [
    "DEFAULT_BASE_URL",
    "AuthenticationError",
    "CatalogLoadError",
    "ConfigError",
    "CreateLinkInput",
    "DesiredLink",
    "Domain",
    "LinkClient",
    "LinkIdentity",
    "LinkSyncConfig",
    "LinkSyncError",
    "LinkUpdate",
    "ReconciliationPlan",
    "RemoteLink",
    "ServiceError",
    "SyncOutcome",
    "SyncResult",
    "UpdateLinkInput",
]
