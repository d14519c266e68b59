"""Auth module public exports."""

from linksync.auth.base import TokenResolver
from linksync.auth.factory import create_token_resolver

__all__ = ["TokenResolver", "create_token_resolver"]
