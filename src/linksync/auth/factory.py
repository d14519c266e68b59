"""Token resolver factory."""

from __future__ import annotations

from linksync.auth.base import TokenResolver
from linksync.auth.resolvers.env import EnvTokenResolver
from linksync.auth.resolvers.static import StaticTokenResolver
from linksync.contracts.config import LinkSyncConfig
from linksync.contracts.exceptions import ConfigError

RESOLVERS: dict[str, type[TokenResolver]] = {
    "env": EnvTokenResolver,
    "token": StaticTokenResolver,
}


def create_token_resolver(config: LinkSyncConfig) -> TokenResolver:
    auth_mode = config.auth
    if auth_mode not in RESOLVERS:
        raise ConfigError(f"Unknown auth mode: {auth_mode}")

    if auth_mode == "env":
        return EnvTokenResolver()
    return StaticTokenResolver(token=config.token or "")
