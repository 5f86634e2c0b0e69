"""
Operator prompts.

Each adapter returns exactly one valid Decision per call. Invalid input
is rejected inside the adapter and the question is asked again.
"""

import logging
from abc import ABC, abstractmethod
from typing import IO, Iterable, List, Optional

import click
from rich.console import Console
from rich.prompt import Prompt

from ..core.errors import PromptExhausted
from ..core.types import Decision

logger = logging.getLogger(__name__)

CHOICES_MESSAGE = "[P]rivate, [G]eneral, [D]efer, [S]kip, [U]ndo, or [A]bort (default)"
DEFAULT_DECISION = Decision.ABORT


class PromptAdapter(ABC):
    """Abstract base class for decision prompts."""

    @abstractmethod
    def ask(self, work_item: str) -> Decision:
        """Block until the operator picks a decision for a file.

        Args:
            work_item: File name being sorted

        Returns:
            The chosen decision
        """
        pass


class DecisionPrompt(Prompt):
    """rich Prompt that accepts decision codes in either case."""

    illegal_choice_message = (
        "[prompt.invalid.choice]Please enter one of P, G, D, S, U or A"
    )

    @classmethod
    def get_input(cls, console, prompt, password, stream=None) -> str:
        # Lines read from a stream keep their newline; input() strips it
        value = super().get_input(console, prompt, password, stream=stream)
        return value.rstrip("\r\n")

    def process_response(self, value: str) -> str:
        return super().process_response(value.strip().lower())


class LinePrompt(PromptAdapter):
    """Line-based prompt; Enter submits, empty input means abort."""

    def __init__(self, console: Optional[Console] = None, stream: Optional[IO[str]] = None):
        """
        Args:
            console: Console used for the question and errors
            stream: Read answers from this stream instead of stdin
        """
        self.console = console or Console()
        self.stream = stream

    def ask(self, work_item: str) -> Decision:
        try:
            answer = DecisionPrompt.ask(
                CHOICES_MESSAGE,
                console=self.console,
                choices=Decision.choices(),
                default=DEFAULT_DECISION.value,
                show_choices=False,
                show_default=False,
                stream=self.stream,
            )
        except EOFError:
            logger.debug("End of input, using default decision")
            self.console.print()
            return DEFAULT_DECISION
        return Decision.parse(answer)


class KeystrokePrompt(PromptAdapter):
    """Single-key prompt; submits as soon as a valid key is pressed."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def ask(self, work_item: str) -> Decision:
        self.console.print(f"{CHOICES_MESSAGE}: ", end="")
        while True:
            key = click.getchar()
            # Empty read means input is closed
            if key in ("", "\r", "\n"):
                self.console.print(DEFAULT_DECISION.value.upper())
                return DEFAULT_DECISION
            try:
                decision = Decision.parse(key)
            except ValueError:
                logger.debug(f"Rejected key {key!r}")
                continue
            self.console.print(key.upper())
            return decision


class ScriptedPrompt(PromptAdapter):
    """Replays a fixed list of decisions; used for tests and automation."""

    def __init__(self, decisions: Iterable[Decision]):
        self.decisions: List[Decision] = list(decisions)
        self.asked: List[str] = []

    def ask(self, work_item: str) -> Decision:
        self.asked.append(work_item)
        if not self.decisions:
            raise PromptExhausted(f"No scripted decision left for {work_item}")
        return self.decisions.pop(0)
