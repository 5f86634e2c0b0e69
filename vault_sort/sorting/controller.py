"""
Sort controller: the per-file decision loop.

Walks the enumerated files once, asks for a decision per file and
dispatches it. Only the most recent successful move can be undone, and
an undo always ends the run.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Sequence

from rich.console import Console
from rich.markup import escape

from ..core.errors import ActionLogError, MoveError
from ..core.types import Decision, MoveRecord, RunOutcome, RunResult, RunState
from .action_log import ActionLogger
from .mover import Mover
from .prompt import PromptAdapter

logger = logging.getLogger(__name__)


class SortController:
    """Drive the sort loop over a fixed sequence of files."""

    def __init__(
        self,
        directory: Path,
        work_items: Sequence[str],
        prompt: PromptAdapter,
        mover: Mover,
        action_log: ActionLogger,
        buckets: Dict[Decision, Path],
        console: Optional[Console] = None,
    ):
        """
        Initialize sort controller.

        Args:
            directory: Working directory holding the files
            work_items: File names, in the order they are offered
            prompt: Source of operator decisions
            mover: Performs relocations
            action_log: Audit log, already prepared
            buckets: Absolute target directory per relocating decision
            console: Console for status output
        """
        self.directory = Path(directory)
        self.work_items = tuple(work_items)
        self.prompt = prompt
        self.mover = mover
        self.action_log = action_log
        self.buckets = dict(buckets)
        self.console = console or Console()
        self.state = RunState()

        missing = [d for d in Decision if d.relocates and d not in self.buckets]
        if missing:
            raise ValueError(f"No bucket configured for {missing}")

    def run(self) -> RunResult:
        """
        Process files until the queue is exhausted, or an abort, an undo
        or a failed move stops the run.

        Returns:
            Result with outcome and exit code
        """
        total = len(self.work_items)
        logger.info(f"Sorting {total} files in {self.directory}")

        while self.state.cursor < total:
            work_item = self.work_items[self.state.cursor]
            self.console.print(f"\n\n[green]For file: {escape(work_item)}...[/green]")

            decision = self.prompt.ask(work_item)
            self.state.prompts += 1
            logger.debug(f"{work_item}: {decision.name}")

            try:
                if decision == Decision.SKIP:
                    self._skip(work_item)
                elif decision == Decision.ABORT:
                    return self._finish(
                        RunOutcome.ABORTED,
                        f"Aborting after moving {self.state.cursor} files. "
                        f"Re-run to continue sorting "
                        f"{total - self.state.cursor} additional files.",
                    )
                elif decision == Decision.UNDO:
                    if self.state.last_move is None:
                        # Re-prompt for the same file
                        self.console.print("[yellow]Nothing to undo.[/yellow]")
                        continue
                    self._undo(self.state.last_move)
                    return self._finish(
                        RunOutcome.UNDONE,
                        f"Exiting after moving {self.state.cursor} files. "
                        f"Re-run to continue sorting "
                        f"{total - self.state.cursor} additional files.",
                    )
                elif decision.relocates:
                    self._relocate(work_item, decision)
                else:
                    return self._fail(f"Invalid decision value: {decision!r}")
            except (MoveError, ActionLogError) as e:
                logger.error(f"Error processing {work_item}: {e}")
                return self._fail(f"ERROR: {e}")

        return self._finish(
            RunOutcome.COMPLETED,
            f"All done, after moving {total} files.",
        )

    def _skip(self, work_item: str) -> None:
        self.console.print(f"[dim]Skipped {escape(work_item)}[/dim]")
        self.state.skipped += 1
        self.state.cursor += 1

    def _relocate(self, work_item: str, decision: Decision) -> None:
        bucket = self.buckets[decision]
        record = self.mover.move(self.directory / work_item, bucket / work_item)
        self.action_log.record(record.command)

        self.state.last_move = record
        self.state.moved += 1
        self.state.cursor += 1

        self.console.print(
            f"[green]Moved[/green] [blue]{escape(work_item)}[/blue] from "
            f"[blue]{escape(str(self.directory))}[/blue] to "
            f"[bright_blue]{escape(str(bucket))}[/bright_blue]"
        )

    def _undo(self, record: MoveRecord) -> None:
        self.console.print("[green]Undoing last change.[/green]")
        reverse = self.mover.undo(record)
        self.action_log.record(reverse.command)

        self.state.last_move = None
        self.state.reversal = reverse
        self.state.moved -= 1
        self.state.undone += 1
        # The undone file goes back into the queue
        self.state.cursor -= 1

        self.console.print(
            f"[green]Moved[/green] [blue]{escape(record.destination.name)}[/blue] back to "
            f"[blue]{escape(str(reverse.destination.parent))}[/blue]"
        )

    def _finish(self, outcome: RunOutcome, message: str) -> RunResult:
        style = "green" if outcome == RunOutcome.COMPLETED else "yellow"
        self.console.print(f"[{style}]{message}[/{style}]")
        return self._result(outcome, exit_code=0)

    def _fail(self, message: str) -> RunResult:
        self.console.print(f"[red]{escape(message)}[/red]")
        return self._result(RunOutcome.FAILED, exit_code=1, error=message)

    def _result(
        self, outcome: RunOutcome, exit_code: int, error: Optional[str] = None
    ) -> RunResult:
        total = len(self.work_items)
        processed = total if outcome == RunOutcome.COMPLETED else self.state.cursor
        return RunResult(
            outcome=outcome,
            exit_code=exit_code,
            total=total,
            processed=processed,
            remaining=total - processed,
            moved=self.state.moved,
            skipped=self.state.skipped,
            undone=self.state.undone,
            prompts=self.state.prompts,
            error=error,
            log_path=self.action_log.path,
            last_move=self.state.last_move,
            reversal=self.state.reversal,
        )
