"""
Sorting module: the interactive decision loop and its collaborators.

The controller asks a prompt adapter for a decision per file, relocates
files through the mover, and records every relocation in the audit log.
"""

from .action_log import ActionLogger
from .controller import SortController
from .mover import Mover
from .prompt import (
    KeystrokePrompt,
    LinePrompt,
    PromptAdapter,
    ScriptedPrompt,
)

__all__ = [
    "ActionLogger",
    "SortController",
    "Mover",
    "KeystrokePrompt",
    "LinePrompt",
    "PromptAdapter",
    "ScriptedPrompt",
]
