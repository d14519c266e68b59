"""Reconciliation plan executor."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable, Sequence
from typing import TypeVar

from linksync.contracts.client import LinkClient
from linksync.contracts.exceptions import ServiceError
from linksync.contracts.link import CreateLinkInput, DesiredLink, LinkIdentity, RemoteLink, UpdateLinkInput
from linksync.contracts.sync import LinkUpdate, ReconciliationPlan, SyncOutcome
from linksync.engine.progress import NullSyncProgress, SyncProgress

_LOG = logging.getLogger(__name__)

T = TypeVar("T")


class SyncExecutor:
    """Apply a plan through a link client, recording per-item failures.

    Creates run first, then updates, then deletes; each phase finishes before
    the next starts. Within a phase up to *max_concurrent* calls are in flight,
    and calls touching the same link identity never overlap.
    """

    def __init__(
        self,
        client: LinkClient,
        *,
        max_concurrent: int = 1,
        progress: SyncProgress | None = None,
    ) -> None:
        if max_concurrent < 1:
            raise ValueError(f"max_concurrent must be at least 1, got {max_concurrent}")
        self._client = client
        self._semaphore = asyncio.Semaphore(max_concurrent)
        self._identity_locks: dict[LinkIdentity, asyncio.Lock] = {}
        self._progress: SyncProgress = progress or NullSyncProgress()

    async def apply(self, plan: ReconciliationPlan) -> SyncOutcome:
        outcome = SyncOutcome()
        try:
            outcome.created = await self._run_phase("Create", plan.to_create, self._create, outcome)
            outcome.updated = await self._run_phase("Update", plan.to_update, self._update, outcome)
            outcome.deleted = await self._run_phase("Delete", plan.to_delete, self._delete, outcome)
        except* Exception as error_group:
            raise error_group.exceptions[0] from None
        return outcome

    async def _run_phase(
        self,
        phase: str,
        items: Sequence[T],
        operation: Callable[[T], Awaitable[None]],
        outcome: SyncOutcome,
    ) -> int:
        self._progress.phase_start(phase, total=len(items))
        errors: list[str | None] = [None] * len(items)
        try:
            async with asyncio.TaskGroup() as tg:
                for index, item in enumerate(items):
                    tg.create_task(self._run_item(phase, index, item, operation, errors))
        except BaseException as exc:
            self._progress.phase_error(phase, exc)
            raise
        self._progress.phase_done(phase)

        failures = [message for message in errors if message is not None]
        outcome.errors.extend(failures)
        return len(items) - len(failures)

    async def _run_item(
        self,
        phase: str,
        index: int,
        item: T,
        operation: Callable[[T], Awaitable[None]],
        errors: list[str | None],
    ) -> None:
        identity = _identity_of(item)
        lock = self._identity_locks.setdefault(identity, asyncio.Lock())
        ok = True
        try:
            async with lock, self._semaphore:
                await operation(item)
        except ServiceError as exc:
            message = f"Failed to {phase.lower()} {identity}: {exc.message}"
            _LOG.warning("%s", message)
            errors[index] = message
            ok = False
        self._progress.item_done(phase, ok=ok)

    async def _create(self, desired: DesiredLink) -> None:
        created = await self._client.create_link(CreateLinkInput.from_desired(desired))
        _LOG.debug("Created %s as %s", desired.identity, created.id)

    async def _update(self, update: LinkUpdate) -> None:
        desired, existing = update
        await self._client.update_link(
            existing.id,
            UpdateLinkInput(
                original_url=desired.url,
                title=desired.title or "",
                tags=list(desired.tags or []),
            ),
        )
        _LOG.debug("Updated %s (%s)", desired.identity, existing.id)

    async def _delete(self, remote: RemoteLink) -> None:
        await self._client.delete_link(remote.id)
        _LOG.debug("Deleted %s (%s)", remote.identity, remote.id)


def _identity_of(item: DesiredLink | LinkUpdate | RemoteLink) -> LinkIdentity:
    if isinstance(item, LinkUpdate):
        return item.desired.identity
    return item.identity
