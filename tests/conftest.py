"""
Pytest configuration and fixtures for vault_sort tests.
"""

import io
from pathlib import Path
from typing import Dict, List

import pytest
from rich.console import Console

from vault_sort.core.types import Decision
from vault_sort.sorting import ActionLogger


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the caller's MLE_VAULT_SORT_* variables out of the tests."""
    for name in (
        "MLE_VAULT_SORT_LOG_PATH",
        "MLE_VAULT_SORT_PRIVATE_DIR",
        "MLE_VAULT_SORT_GENERAL_DIR",
        "MLE_VAULT_SORT_DEFER_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def inbox(tmp_path: Path) -> Path:
    """Working directory with empty sibling bucket directories."""
    inbox_dir = tmp_path / "inbox"
    inbox_dir.mkdir()
    for name in ("private", "general", "defer"):
        (tmp_path / name).mkdir()
    return inbox_dir


@pytest.fixture
def buckets(inbox: Path) -> Dict[Decision, Path]:
    """Bucket directories next to the inbox."""
    root = inbox.parent
    return {
        Decision.PRIVATE: root / "private",
        Decision.GENERAL: root / "general",
        Decision.DEFER: root / "defer",
    }


@pytest.fixture
def make_files(inbox: Path):
    """Create files in the inbox and return their names."""

    def _make(*names: str) -> List[str]:
        for name in names:
            (inbox / name).write_text(f"contents of {name}", encoding="utf-8")
        return list(names)

    return _make


@pytest.fixture
def console() -> Console:
    """Console writing to a buffer, wide enough to avoid wrapping."""
    return Console(file=io.StringIO(), width=300, color_system=None)


@pytest.fixture
def action_log(tmp_path: Path) -> ActionLogger:
    """Prepared audit log."""
    log = ActionLogger(tmp_path / "logs" / "log.txt")
    log.prepare()
    return log
