"""Reconciliation plan and outcome contracts."""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, Field

from linksync.contracts.link import DesiredLink, RemoteLink


class LinkUpdate(NamedTuple):
    desired: DesiredLink
    existing: RemoteLink


class ReconciliationPlan(BaseModel):
    to_create: list[DesiredLink] = Field(default_factory=list)
    to_update: list[LinkUpdate] = Field(default_factory=list)
    to_delete: list[RemoteLink] = Field(default_factory=list)

    @property
    def total(self) -> int:
        return len(self.to_create) + len(self.to_update) + len(self.to_delete)

    @property
    def is_empty(self) -> bool:
        return self.total == 0


class SyncOutcome(BaseModel):
    created: int = 0
    updated: int = 0
    deleted: int = 0
    errors: list[str] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors


class SyncResult(BaseModel):
    plan: ReconciliationPlan
    outcome: SyncOutcome = Field(default_factory=SyncOutcome)
    domains: list[str] = Field(default_factory=list)
    dry_run: bool = False
