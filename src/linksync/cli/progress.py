"""Rich terminal display for link sync phases."""

from __future__ import annotations

from types import TracebackType
from typing import ClassVar

from rich.console import Console
from rich.progress import BarColumn, MofNCompleteColumn, Progress, SpinnerColumn, TextColumn, TimeElapsedColumn
from rich.progress import TaskID as RichTaskID

from linksync.engine.progress import SyncProgress


def _failure_label(count: int) -> str:
    return f"[red]{count} failed[/red]" if count else ""


class RichSyncProgress(SyncProgress):
    """One bar per sync phase, with a running count of failed link operations.

    Discover advances once per managed domain; Create, Update and Delete once
    per planned link. A phase that finished with recorded failures is marked
    with a yellow ``!``; a phase aborted by an exception with a red ``✗``::

        with RichSyncProgress() as progress:
            result = await LinkSync(config=config, progress=progress).sync()
    """

    _PHASE_STYLES: ClassVar[dict[str, str]] = {
        "Discover": "cyan",
        "Create": "green",
        "Update": "blue",
        "Delete": "magenta",
    }

    def __init__(self, console: Console | None = None) -> None:
        self._progress = Progress(
            SpinnerColumn(finished_text="[green]✓[/green]"),
            TextColumn("{task.description:>12}"),
            BarColumn(bar_width=30),
            MofNCompleteColumn(),
            TextColumn("{task.fields[failures]}"),
            TimeElapsedColumn(),
            console=console or Console(stderr=True),
        )
        self._task_ids: dict[str, RichTaskID] = {}
        self._failures: dict[str, int] = {}

    @property
    def failures(self) -> dict[str, int]:
        """Failed link operations per started phase."""
        return dict(self._failures)

    def __enter__(self) -> RichSyncProgress:
        self._progress.start()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        self._progress.stop()

    def phase_start(self, phase: str, total: int | None = None) -> None:
        self._failures[phase] = 0
        self._task_ids[phase] = self._progress.add_task(self._label(phase), total=total, failures="")

    def item_done(self, phase: str, *, ok: bool = True) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        if ok:
            self._progress.advance(task_id)
            return
        self._failures[phase] += 1
        self._progress.update(task_id, advance=1, failures=_failure_label(self._failures[phase]))

    def phase_done(self, phase: str) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        task = self._progress.tasks[task_id]
        total = task.total if task.total is not None else 1
        description = self._label(phase)
        if self._failures[phase]:
            description = f"[yellow]![/yellow] {description}"
        self._progress.update(task_id, total=total, completed=total, description=description)

    def phase_error(self, phase: str, error: BaseException) -> None:
        task_id = self._task_ids.get(phase)
        if task_id is None:
            return
        self._progress.update(task_id, description=f"[red]✗[/red] {phase}")

    def _label(self, phase: str) -> str:
        style = self._PHASE_STYLES.get(phase)
        return f"[{style}]{phase}[/]" if style else phase
