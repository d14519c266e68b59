"""Reconciliation engine exports."""

from .diff import compute_diff
from .executor import SyncExecutor
from .progress import NullSyncProgress, SyncProgress

__all__ = ["NullSyncProgress", "SyncExecutor", "SyncProgress", "compute_diff"]
