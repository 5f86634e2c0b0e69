"""
Single-file relocation with dry-run support.

A move either completes and yields a MoveRecord or raises MoveError; the
caller treats the error as fatal and never retries.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console
from rich.markup import escape

from ..core.errors import MoveError
from ..core.types import MoveRecord

logger = logging.getLogger(__name__)

MoveFunc = Callable[[str, str], object]


class Mover:
    """Relocate files one at a time."""

    def __init__(
        self,
        dry_run: bool = False,
        move_func: MoveFunc = shutil.move,
        console: Optional[Console] = None,
    ):
        """
        Initialize mover.

        Args:
            dry_run: If True, report moves without touching the filesystem
            move_func: Function performing the actual relocation
            console: Console for dry-run notices
        """
        self.dry_run = dry_run
        self.move_func = move_func
        self.console = console or Console()

    def move(self, source: Path, destination: Path) -> MoveRecord:
        """
        Move a file to an explicit destination path.

        Args:
            source: File to move
            destination: Full target path, including the file name

        Returns:
            Record of the relocation

        Raises:
            MoveError: If the move cannot be completed
        """
        record = MoveRecord(
            source=Path(os.path.abspath(source)),
            destination=Path(os.path.abspath(destination)),
            dry_run=self.dry_run,
        )

        if self.dry_run:
            logger.info(f"[DRY RUN] Would move {record.source} → {record.destination}")
            self.console.print(f"[yellow][DRY RUN][/yellow] {escape(record.command)}")
            return record

        self._check(record)

        try:
            self.move_func(str(record.source), str(record.destination))
        except OSError as e:
            raise MoveError(
                f"Failed to move {record.source} to {record.destination}: {e}"
            ) from e

        logger.info(f"Moved {record.source} → {record.destination}")
        return record

    def undo(self, record: MoveRecord) -> MoveRecord:
        """
        Reverse a previous relocation.

        Args:
            record: Relocation to reverse

        Returns:
            Record of the reversing relocation
        """
        inverse = record.reversed()
        return self.move(inverse.source, inverse.destination)

    def _check(self, record: MoveRecord) -> None:
        if not record.source.is_file():
            raise MoveError(f"Source file not found: {record.source}")
        if not record.destination.parent.is_dir():
            raise MoveError(
                f"Destination directory does not exist: {record.destination.parent}"
            )
        # No overwrite and no renaming on collision
        if record.destination.exists() or record.destination.is_symlink():
            raise MoveError(f"Destination already exists: {record.destination}")
