"""Concrete token resolvers."""

from linksync.auth.resolvers.env import API_KEY_ENV_VAR, EnvTokenResolver
from linksync.auth.resolvers.static import StaticTokenResolver

__all__ = ["API_KEY_ENV_VAR", "EnvTokenResolver", "StaticTokenResolver"]
