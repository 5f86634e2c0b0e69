"""
CLI command for sorting a directory one file at a time.
"""

import logging
import sys
from pathlib import Path
from typing import Dict, Optional

import click
from rich.console import Console

from ..config import Settings
from ..core.enumerator import list_work_items
from ..core.errors import ActionLogError, VaultSortError
from ..core.types import Decision, RunResult
from ..sorting import (
    ActionLogger,
    KeystrokePrompt,
    LinePrompt,
    Mover,
    PromptAdapter,
    SortController,
)
from ..version import get_version_string
from .base import CLIDisplay, common_options, setup_logging

logger = logging.getLogger(__name__)


@click.command()
@click.option(
    "--dry",
    "--dry-run",
    "dry_run",
    is_flag=True,
    default=False,
    help="Simulate moves without touching any files",
)
@click.option(
    "-d",
    "--directory",
    type=click.Path(file_okay=False),
    default=".",
    show_default=True,
    help="Directory whose files are sorted",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Audit log file (default: $MLE_VAULT_SORT_LOG_PATH or logs/ next to the program)",
)
@click.option(
    "--single-key",
    is_flag=True,
    default=False,
    help="Submit each decision with a single keystroke",
)
@click.option(
    "--skip-hidden",
    is_flag=True,
    default=False,
    help="Do not offer dot-files",
)
@click.option(
    "--create-buckets",
    is_flag=True,
    default=False,
    help="Create missing private/general/defer directories first",
)
@click.option(
    "--version",
    is_flag=True,
    help="Show version and exit",
)
@common_options
def cli(
    dry_run: bool,
    directory: str,
    log_path: Optional[str],
    single_key: bool,
    skip_hidden: bool,
    create_buckets: bool,
    version: bool,
    verbose: bool,
    quiet: bool,
) -> None:
    """
    Sort the files of a directory into buckets, one file at a time.

    For every file choose [P]rivate, [G]eneral or [D]efer to move it into
    the matching sibling directory, [S]kip to leave it, [U]ndo to move the
    previous file back and stop, or [A]bort (default) to stop.

    \b
    Examples:
        # Preview a run without moving anything
        vault-sort --dry

        # Sort another directory, one keystroke per file
        vault-sort -d ~/vault/inbox --single-key

    \b
    Environment:
        MLE_VAULT_SORT_LOG_PATH     audit log file
        MLE_VAULT_SORT_PRIVATE_DIR  private bucket (default ../private)
        MLE_VAULT_SORT_GENERAL_DIR  general bucket (default ../general)
        MLE_VAULT_SORT_DEFER_DIR    defer bucket (default ../defer)
    """
    console = Console()

    if version:
        console.print(get_version_string())
        sys.exit(0)

    setup_logging(verbose=verbose, quiet=quiet, console=console)
    display = CLIDisplay(console)

    settings = Settings()
    working_dir = Path(directory).expanduser().resolve()
    log_file = settings.resolve_log_path(Path(log_path) if log_path else None)
    buckets = settings.bucket_dirs(working_dir)

    action_log = ActionLogger(log_file)
    try:
        action_log.prepare()
    except ActionLogError as e:
        display.print_error(f"{e}. ABORTING")
        sys.exit(1)

    try:
        work_items = list_work_items(
            working_dir, include_hidden=not skip_hidden, exclude=[log_file]
        )
        if create_buckets:
            _create_buckets(buckets, dry_run, display)
    except VaultSortError as e:
        display.print_error(f"✗ {e}")
        sys.exit(1)

    display.print_config(
        {
            "Directory": str(working_dir),
            "Files": str(len(work_items)),
            "Private": str(buckets[Decision.PRIVATE]),
            "General": str(buckets[Decision.GENERAL]),
            "Defer": str(buckets[Decision.DEFER]),
            "Dry run": "YES" if dry_run else "NO",
        }
    )
    if dry_run:
        display.print_warning("⚠ DRY RUN MODE - No files will be moved")

    prompt: PromptAdapter
    if single_key:
        prompt = KeystrokePrompt(console)
    else:
        prompt = LinePrompt(console)

    controller = SortController(
        directory=working_dir,
        work_items=work_items,
        prompt=prompt,
        mover=Mover(dry_run=dry_run, console=console),
        action_log=action_log,
        buckets=buckets,
        console=console,
    )

    try:
        result = controller.run()
    except KeyboardInterrupt:
        display.print_warning("\nInterrupted, stopping without further moves.")
        _print_log_location(console, log_file)
        sys.exit(1)
    except VaultSortError as e:
        display.print_error(f"✗ Error: {e}")
        if verbose:
            console.print_exception()
        sys.exit(1)

    _display_result(display, result)
    sys.exit(result.exit_code)


def _create_buckets(buckets: Dict[Decision, Path], dry_run: bool, display: CLIDisplay) -> None:
    for bucket in buckets.values():
        if bucket.is_dir():
            continue
        if dry_run:
            display.print_warning(f"[DRY RUN] Would create {bucket}")
            continue
        try:
            bucket.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise VaultSortError(f"Unable to create bucket directory {bucket}: {e}") from e
        logger.info(f"Created bucket {bucket}")


def _display_result(display: CLIDisplay, result: RunResult) -> None:
    """Display run summary."""
    display.console.print()
    display.print_summary(
        {
            "Moved": result.moved,
            "Skipped": result.skipped,
            "Undone": result.undone,
            "Remaining": result.remaining,
        },
        title=f"Run {result.outcome.value}",
    )
    if result.log_path is not None:
        _print_log_location(display.console, result.log_path)


def _print_log_location(console: Console, log_file: Path) -> None:
    console.print(f"[blue]View the log for this run at:[/blue] {log_file}")


if __name__ == "__main__":
    cli()
