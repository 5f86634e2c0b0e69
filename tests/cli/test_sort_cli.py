"""Tests for the vault-sort CLI command."""

from pathlib import Path
from typing import Dict, List, Optional

import pytest
from click.testing import CliRunner, Result

from vault_sort.cli.sort import cli
from vault_sort.sorting import ActionLogger


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def log_file(tmp_path: Path) -> Path:
    return tmp_path / "logs" / "run.txt"


def invoke(
    runner: CliRunner,
    inbox: Path,
    log_file: Path,
    input_text: str,
    *extra: str,
    env: Optional[Dict[str, str]] = None,
) -> Result:
    args = ["--directory", str(inbox), "--log-path", str(log_file), *extra]
    return runner.invoke(cli, args, input=input_text, env={"COLUMNS": "300", **(env or {})})


def log_commands(log_file: Path) -> List[str]:
    return [ActionLogger.command_of(line) for line in ActionLogger(log_file).lines()]


class TestSortCommand:
    """Integration tests for interactive sorting."""

    def test_help(self, cli_runner: CliRunner) -> None:
        """Help describes the choices."""
        result = cli_runner.invoke(cli, ["--help"])

        assert result.exit_code == 0
        assert "--dry" in result.output
        assert "[P]rivate" in result.output

    def test_version(self, cli_runner: CliRunner) -> None:
        """--version prints and exits cleanly."""
        result = cli_runner.invoke(cli, ["--version"])

        assert result.exit_code == 0
        assert "vault-sort" in result.output

    def test_all_skips(self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path) -> None:
        """Skipping everything finishes with exit code 0."""
        make_files("a.txt", "b.txt")

        result = invoke(cli_runner, inbox, log_file, "s\nS\n")

        assert result.exit_code == 0
        assert "All done, after moving 2 files." in result.output
        assert log_commands(log_file) == []

    def test_moves_into_buckets(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Decisions relocate files into sibling directories."""
        make_files("a.txt", "b.txt", "c.txt")

        result = invoke(cli_runner, inbox, log_file, "p\ng\nd\n")

        assert result.exit_code == 0
        root = inbox.parent
        assert (root / "private" / "a.txt").exists()
        assert (root / "general" / "b.txt").exists()
        assert (root / "defer" / "c.txt").exists()
        assert len(log_commands(log_file)) == 3
        assert "View the log for this run at:" in result.output

    def test_private_then_undo(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Undo puts the file back, logs both moves and stops."""
        make_files("a.txt", "b.txt")

        result = invoke(cli_runner, inbox, log_file, "p\nu\n")

        assert result.exit_code == 0
        assert "Exiting after moving 0 files." in result.output
        assert "sorting 2 additional files." in result.output
        assert (inbox / "a.txt").exists()
        assert not (inbox.parent / "private" / "a.txt").exists()
        commands = log_commands(log_file)
        assert len(commands) == 2
        assert commands[0].startswith(f"mv {inbox / 'a.txt'}")
        assert commands[1].endswith(str(inbox / "a.txt"))

    def test_nothing_to_undo(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Undo before any move asks again."""
        make_files("a.txt")

        result = invoke(cli_runner, inbox, log_file, "u\ns\n")

        assert result.exit_code == 0
        assert "Nothing to undo." in result.output
        assert result.output.count("For file: a.txt...") == 2

    def test_invalid_input_reprompts(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Invalid answers never reach the sort loop."""
        make_files("a.txt")

        result = invoke(cli_runner, inbox, log_file, "x\nG\n")

        assert result.exit_code == 0
        assert "Please enter one of" in result.output
        assert (inbox.parent / "general" / "a.txt").exists()

    def test_empty_answer_aborts(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Enter alone is the default abort."""
        make_files("a.txt", "b.txt")

        result = invoke(cli_runner, inbox, log_file, "\n")

        assert result.exit_code == 0
        assert "Aborting after moving 0 files." in result.output
        assert sorted(p.name for p in inbox.iterdir()) == ["a.txt", "b.txt"]

    def test_end_of_input_aborts(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Closed input behaves like the default abort."""
        make_files("a.txt", "b.txt")

        result = invoke(cli_runner, inbox, log_file, "s\n")

        assert result.exit_code == 0
        assert "Aborting after moving 1 files." in result.output

    def test_dry_run(self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path) -> None:
        """Dry run logs the move but leaves the file in place."""
        make_files("a.txt")

        result = invoke(cli_runner, inbox, log_file, "p\n", "--dry")

        assert result.exit_code == 0
        assert "DRY RUN" in result.output
        assert (inbox / "a.txt").exists()
        assert log_commands(log_file) == [
            f"mv {inbox / 'a.txt'} {(inbox.parent / 'private').resolve() / 'a.txt'}"
        ]

    def test_single_key(self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path) -> None:
        """Keystroke mode submits without Enter."""
        make_files("a.txt")

        result = invoke(cli_runner, inbox, log_file, "g", "--single-key")

        assert result.exit_code == 0
        assert (inbox.parent / "general" / "a.txt").exists()

    def test_log_path_from_environment(
        self, cli_runner: CliRunner, inbox: Path, make_files, tmp_path: Path
    ) -> None:
        """MLE_VAULT_SORT_LOG_PATH picks the audit log."""
        make_files("a.txt")
        env_log = tmp_path / "env-logs" / "audit.txt"

        result = cli_runner.invoke(
            cli,
            ["--directory", str(inbox)],
            input="p\n",
            env={"COLUMNS": "300", "MLE_VAULT_SORT_LOG_PATH": str(env_log)},
        )

        assert result.exit_code == 0
        assert len(log_commands(env_log)) == 1

    def test_log_inside_working_directory_not_offered(
        self, cli_runner: CliRunner, inbox: Path, make_files
    ) -> None:
        """The audit log is never one of the files to sort."""
        make_files("a.txt")

        result = invoke(cli_runner, inbox, inbox / "log.txt", "s\n")

        assert result.exit_code == 0
        assert "For file: log.txt" not in result.output
        assert "All done, after moving 1 files." in result.output

    def test_create_buckets(
        self, cli_runner: CliRunner, tmp_path: Path, log_file: Path
    ) -> None:
        """Missing buckets can be created up front."""
        inbox = tmp_path / "fresh" / "inbox"
        inbox.mkdir(parents=True)
        (inbox / "a.txt").write_text("x")

        result = invoke(cli_runner, inbox, log_file, "d\n", "--create-buckets")

        assert result.exit_code == 0
        assert (tmp_path / "fresh" / "defer" / "a.txt").exists()
        assert (tmp_path / "fresh" / "private").is_dir()


class TestSortCommandErrors:
    """Fatal conditions exit with code 1."""

    def test_log_directory_uncreatable(
        self, cli_runner: CliRunner, inbox: Path, make_files, tmp_path: Path
    ) -> None:
        """No prompting happens without a log."""
        make_files("a.txt")
        blocker = tmp_path / "blocker"
        blocker.write_text("x")

        result = invoke(cli_runner, inbox, blocker / "logs" / "log.txt", "p\n")

        assert result.exit_code == 1
        assert "ABORTING" in result.output
        assert "For file" not in result.output
        assert (inbox / "a.txt").exists()

    def test_missing_directory(self, cli_runner: CliRunner, tmp_path: Path, log_file: Path) -> None:
        """An unreadable working directory is fatal."""
        result = invoke(cli_runner, tmp_path / "missing", log_file, "")

        assert result.exit_code == 1
        assert "Unable to read directory" in result.output

    def test_move_failure(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """A collision in the bucket stops the run."""
        make_files("a.txt", "b.txt")
        (inbox.parent / "private" / "a.txt").write_text("taken")

        result = invoke(cli_runner, inbox, log_file, "p\ns\n")

        assert result.exit_code == 1
        assert "already exists" in result.output
        assert "For file: b.txt" not in result.output
        assert log_commands(log_file) == []

    def test_missing_bucket(
        self, cli_runner: CliRunner, inbox: Path, make_files, log_file: Path
    ) -> None:
        """Without --create-buckets a missing bucket is a move failure."""
        make_files("a.txt")
        (inbox.parent / "defer").rmdir()

        result = invoke(cli_runner, inbox, log_file, "d\n")

        assert result.exit_code == 1
        assert (inbox / "a.txt").exists()
