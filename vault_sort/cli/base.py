"""
Shared CLI helpers: logging setup, common options and display.
"""

import logging
from typing import Callable, Dict, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table


def setup_logging(
    verbose: bool = False, quiet: bool = False, console: Optional[Console] = None
) -> None:
    """
    Configure diagnostic logging with a rich handler.

    The default level is WARNING so log records stay out of the prompt.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to ERROR
        console: Console the handler writes to
    """
    if quiet:
        level = logging.ERROR
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, console=console or Console())],
        force=True,
    )


def common_options(f: Callable) -> Callable:
    """Apply standard CLI options (verbose, quiet)."""
    decorators = [
        click.option(
            "-v",
            "--verbose",
            is_flag=True,
            help="Enable verbose logging",
        ),
        click.option(
            "-q",
            "--quiet",
            is_flag=True,
            help="Only log errors",
        ),
    ]
    for decorator in reversed(decorators):
        f = decorator(f)
    return f


class CLIDisplay:
    """Standardized CLI output helpers."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()

    def print_config(self, config: Dict[str, str]) -> None:
        """Print configuration table.

        Args:
            config: Dictionary of setting name -> value
        """
        table = Table(show_header=False, box=None)
        table.add_column("Setting", style="cyan")
        table.add_column("Value", style="green")

        for key, value in config.items():
            table.add_row(key, escape(str(value)))

        self.console.print(table)

    def print_summary(self, metrics: Dict[str, int], title: str = "Summary") -> None:
        """Print summary table.

        Args:
            metrics: Dictionary of metric name -> value
            title: Table title
        """
        table = Table(title=title)
        table.add_column("Metric", style="cyan")
        table.add_column("Count", style="green", justify="right")

        for key, value in metrics.items():
            table.add_row(key, f"{value:,}")

        self.console.print(table)

    def print_warning(self, message: str) -> None:
        self.console.print(f"[yellow]{escape(message)}[/yellow]")

    def print_error(self, message: str) -> None:
        self.console.print(f"[red]{escape(message)}[/red]")
