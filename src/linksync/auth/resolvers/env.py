"""Environment API key resolver."""

from __future__ import annotations

import os
from dataclasses import dataclass

from linksync.auth.base import TokenResolver
from linksync.contracts.exceptions import AuthenticationError

API_KEY_ENV_VAR = "SHORTIO_API_KEY"


@dataclass(frozen=True)
class EnvTokenResolver(TokenResolver):
    variable: str = API_KEY_ENV_VAR

    async def resolve(self) -> str:
        token = (os.getenv(self.variable) or "").strip()
        if not token:
            raise AuthenticationError(f"{self.variable} is not set or empty")
        return token
