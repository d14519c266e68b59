"""Progress observer that records lifecycle events."""

from __future__ import annotations

from linksync.engine.progress import SyncProgress


class RecordingProgress(SyncProgress):
    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self.events.append(("start", f"{phase}:{total}"))

    def item_done(self, phase: str, *, ok: bool = True) -> None:
        self.events.append(("item" if ok else "failed", phase))

    def phase_done(self, phase: str) -> None:
        self.events.append(("done", phase))

    def phase_error(self, phase: str, error: BaseException) -> None:
        self.events.append(("error", phase))
