"""Sync command formatting and execution."""

from __future__ import annotations

import argparse
from pathlib import Path

from linksync.cli.progress import RichSyncProgress
from linksync.contracts.config import LinkSyncConfig
from linksync.contracts.sync import SyncResult


def format_sync_summary(result: SyncResult) -> str:
    mode = "dry-run" if result.dry_run else "apply"
    plan = result.plan
    domains = ", ".join(result.domains) if result.domains else "none"

    lines = [
        "",
        f"linksync - sync complete ({mode})",
        "",
        f"  Domains:   {domains}",
        f"  Planned:   {len(plan.to_create)} create, {len(plan.to_update)} update, {len(plan.to_delete)} delete",
    ]

    if result.dry_run:
        lines.append("")
        for desired in plan.to_create:
            lines.append(f"  + {desired.identity}  ->  {desired.url}")
        for update in plan.to_update:
            lines.append(f"  ~ {update.desired.identity}  ->  {update.desired.url}")
        for remote in plan.to_delete:
            lines.append(f"  - {remote.identity}")
        if plan.is_empty:
            lines.append("  Status:    all links up to date")
        lines.append("")
        lines.append("  [dry-run] No changes were made")
        lines.append("")
        return "\n".join(lines)

    outcome = result.outcome
    lines.append(f"  Applied:   {outcome.created} created, {outcome.updated} updated, {outcome.deleted} deleted")
    if plan.is_empty:
        lines.append("  Status:    all links up to date")
    if outcome.errors:
        lines.append("")
        lines.append(f"  Errors:    {len(outcome.errors)}")
        for error in outcome.errors:
            lines.append(f"    - {error}")

    lines.append("")
    return "\n".join(lines)


def resolve_config(args: argparse.Namespace) -> LinkSyncConfig:
    import linksync.cli as cli

    if args.config:
        return cli.load_config(args.config)
    return LinkSyncConfig(catalog_path=Path(args.catalog).expanduser().resolve())


async def run_sync(args: argparse.Namespace) -> SyncResult:
    import linksync.cli as cli

    config = resolve_config(args)

    if not args.verbose:
        with RichSyncProgress() as progress:
            syncer = await cli.LinkSync.from_config(config, progress=progress)
            result = await syncer.sync(dry_run=args.dry_run)
    else:
        syncer = await cli.LinkSync.from_config(config)
        result = await syncer.sync(dry_run=args.dry_run)

    print(format_sync_summary(result))
    return result


__all__ = ["format_sync_summary", "resolve_config", "run_sync"]
