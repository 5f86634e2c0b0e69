"""
Core types and the file enumerator.
"""

from .enumerator import list_work_items
from .errors import (
    ActionLogError,
    EnumerationError,
    MoveError,
    PromptExhausted,
    VaultSortError,
)
from .types import Decision, MoveRecord, RunOutcome, RunResult, RunState

__all__ = [
    "list_work_items",
    "ActionLogError",
    "EnumerationError",
    "MoveError",
    "PromptExhausted",
    "VaultSortError",
    "Decision",
    "MoveRecord",
    "RunOutcome",
    "RunResult",
    "RunState",
]
