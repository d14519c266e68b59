"""Public API surface for linksync."""

__version__ = "0.1.0"

from linksync.auth import create_token_resolver
from linksync.contracts.client import LinkClient
from linksync.contracts.config import LinkSyncConfig
from linksync.contracts.exceptions import (
    AuthenticationError,
    CatalogLoadError,
    ConfigError,
    LinkSyncError,
    ServiceError,
)
from linksync.contracts.link import CreateLinkInput, DesiredLink, Domain, LinkIdentity, RemoteLink, UpdateLinkInput
from linksync.contracts.sync import LinkUpdate, ReconciliationPlan, SyncOutcome, SyncResult
from linksync.engine import SyncExecutor, SyncProgress, compute_diff
from linksync.providers import create_client
from linksync.sdk import LinkSync, load_catalog, load_config

__all__ = [
    "AuthenticationError",
    "CatalogLoadError",
    "ConfigError",
    "CreateLinkInput",
    "DesiredLink",
    "Domain",
    "LinkClient",
    "LinkIdentity",
    "LinkSync",
    "LinkSyncConfig",
    "LinkSyncError",
    "LinkUpdate",
    "ReconciliationPlan",
    "RemoteLink",
    "ServiceError",
    "SyncExecutor",
    "SyncOutcome",
    "SyncProgress",
    "SyncResult",
    "UpdateLinkInput",
    "__version__",
    "compute_diff",
    "create_client",
    "create_token_resolver",
    "load_catalog",
    "load_config",
]
