"""
Append-only audit log of relocations.

One human-readable line per performed (or simulated) move, undo moves
included. This is a transcript for people, not an event stream.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List

from ..core.errors import ActionLogError

logger = logging.getLogger(__name__)


class ActionLogger:
    """Write relocation commands to the audit log file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def prepare(self) -> None:
        """
        Create the log directory and an empty log file.

        Raises:
            ActionLogError: If the directory or file cannot be created
        """
        log_dir = self.path.parent
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise ActionLogError(
                f"Unable to access or create log directory at path {log_dir}: {e}"
            ) from e

        try:
            self.path.write_text("", encoding="utf-8")
        except OSError as e:
            raise ActionLogError(f"Unable to create log file {self.path}: {e}") from e

        logger.debug(f"Audit log at {self.path}")

    def record(self, command: str) -> None:
        """
        Append one command line to the log.

        Args:
            command: Relocation command text

        Raises:
            ActionLogError: If the line cannot be written
        """
        line = f"{datetime.now().isoformat()} {command}\n"
        try:
            with open(self.path, "a", encoding="utf-8") as f:
                f.write(line)
        except OSError as e:
            raise ActionLogError(f"Unable to write to log file {self.path}: {e}") from e

    def lines(self) -> List[str]:
        """Recorded lines, without trailing newlines."""
        if not self.path.exists():
            return []
        return self.path.read_text(encoding="utf-8").splitlines()

    @staticmethod
    def command_of(line: str) -> str:
        """Strip the timestamp from a recorded line."""
        _, _, command = line.partition(" ")
        return command
