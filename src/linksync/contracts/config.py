"""Configuration contracts."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, Field, model_validator

DEFAULT_BASE_URL = "https://api.short.io/api"


class LinkSyncConfig(BaseModel):
    catalog_path: Path
    provider: str = "shortio"
    base_url: str = DEFAULT_BASE_URL
    auth: str = "env"
    token: str | None = None
    managed_domains: list[str] = Field(default_factory=list)
    max_concurrent: int = Field(default=1, ge=1, le=10)

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_auth_token(self) -> LinkSyncConfig:
        token = (self.token or "").strip()
        if self.auth == "token":
            if not token:
                raise ValueError("token auth requires a non-empty token")
            return self
        if token:
            raise ValueError("token must be unset when auth is not 'token'")
        if self.auth != "env":
            raise ValueError("auth must be one of: env, token")
        return self
