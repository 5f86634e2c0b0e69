"""
Type definitions for the sort loop.
"""

import shlex
from enum import Enum
from pathlib import Path
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class Decision(str, Enum):
    """Operator's choice for a single file."""

    PRIVATE = "p"
    GENERAL = "g"
    DEFER = "d"
    SKIP = "s"
    UNDO = "u"
    ABORT = "a"

    @classmethod
    def parse(cls, text: str) -> "Decision":
        """
        Parse a decision code, ignoring case and surrounding whitespace.

        Args:
            text: Raw operator input

        Returns:
            Matching decision

        Raises:
            ValueError: If the input is not one of the codes
        """
        code = text.strip().lower()
        for decision in cls:
            if decision.value == code:
                return decision
        raise ValueError(f"Invalid decision: {text!r}")

    @classmethod
    def choices(cls) -> List[str]:
        """Codes in prompt order, default first."""
        return [
            cls.ABORT.value,
            cls.PRIVATE.value,
            cls.GENERAL.value,
            cls.DEFER.value,
            cls.SKIP.value,
            cls.UNDO.value,
        ]

    @property
    def relocates(self) -> bool:
        """True for decisions that move the file into a bucket."""
        return self in (Decision.PRIVATE, Decision.GENERAL, Decision.DEFER)


class MoveRecord(BaseModel):
    """A completed (or simulated) relocation."""

    source: Path = Field(description="Absolute path the file was moved from")
    destination: Path = Field(description="Absolute path the file was moved to")
    dry_run: bool = Field(default=False, description="Whether the move was simulated")

    model_config = ConfigDict(frozen=True)

    def reversed(self) -> "MoveRecord":
        """Record for the inverse relocation."""
        return MoveRecord(
            source=self.destination,
            destination=self.source,
            dry_run=self.dry_run,
        )

    @property
    def command(self) -> str:
        """Literal relocation command, e.g. ``mv /in/a.txt /private/a.txt``."""
        return shlex.join(["mv", str(self.source), str(self.destination)])


class RunOutcome(str, Enum):
    """How a sort run ended."""

    COMPLETED = "completed"
    ABORTED = "aborted"
    UNDONE = "undone"
    FAILED = "failed"


class RunState(BaseModel):
    """Mutable state of a sort run."""

    cursor: int = 0
    last_move: Optional[MoveRecord] = None
    # Set only by an undo, which ends the run
    reversal: Optional[MoveRecord] = None
    moved: int = 0
    skipped: int = 0
    undone: int = 0
    prompts: int = 0


class RunResult(BaseModel):
    """Result of a sort run."""

    outcome: RunOutcome
    exit_code: int = 0
    total: int = 0
    processed: int = 0
    remaining: int = 0
    moved: int = 0
    skipped: int = 0
    undone: int = 0
    prompts: int = 0
    error: Optional[str] = None
    log_path: Optional[Path] = None
    last_move: Optional[MoveRecord] = None
    reversal: Optional[MoveRecord] = None
