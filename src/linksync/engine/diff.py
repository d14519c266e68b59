"""Desired-versus-actual link diff."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from linksync.contracts.link import DesiredLink, LinkIdentity, RemoteLink
from linksync.contracts.sync import LinkUpdate, ReconciliationPlan


def compute_diff(desired: Sequence[DesiredLink], actual: Sequence[RemoteLink]) -> ReconciliationPlan:
    """Compute the create/update/delete plan that brings *actual* to *desired*.

    Pure and deterministic: buckets follow input order (desired order for
    creates and updates, actual order for deletes). A desired link lands in at
    most one of ``to_create``/``to_update``; in-sync links land nowhere.
    """
    actual_by_identity: dict[LinkIdentity, RemoteLink] = {}
    for remote in actual:
        actual_by_identity.setdefault(remote.identity, remote)
    desired_identities = {link.identity for link in desired}

    plan = ReconciliationPlan()
    for link in desired:
        existing = actual_by_identity.get(link.identity)
        if existing is None:
            plan.to_create.append(link)
        elif needs_update(link, existing):
            plan.to_update.append(LinkUpdate(desired=link, existing=existing))

    for remote in actual:
        if remote.identity not in desired_identities:
            plan.to_delete.append(remote)

    return plan


def needs_update(desired: DesiredLink, existing: RemoteLink) -> bool:
    if desired.url != existing.original_url:
        return True
    if (desired.title or "") != (existing.title or ""):
        return True
    return not tags_equal(desired.tags, existing.tags)


def tags_equal(left: Iterable[str] | None, right: Iterable[str] | None) -> bool:
    """Compare tag collections as sets; ``None`` and empty are the same."""
    return set(left or ()) == set(right or ())
