"""Runtime configuration."""

import sys
from datetime import datetime
from pathlib import Path
from typing import Dict, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict

from .core.types import Decision

ENV_PREFIX = "MLE_VAULT_SORT_"


def default_log_path(now: Optional[datetime] = None) -> Path:
    """Log path next to the running program: ``logs/log-<timestamp>.txt``."""
    now = now or datetime.now()
    program_dir = Path(sys.argv[0]).resolve().parent
    return program_dir / "logs" / f"log-{now.strftime('%Y-%m-%dT%H-%M-%S')}.txt"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Audit log override; falls back to default_log_path()
    log_path: Optional[Path] = None

    # Bucket directories, relative to the working directory
    private_dir: str = "../private"
    general_dir: str = "../general"
    defer_dir: str = "../defer"

    model_config = SettingsConfigDict(
        env_prefix=ENV_PREFIX,
        extra="ignore",
    )

    def resolve_log_path(self, override: Optional[Path] = None) -> Path:
        """Pick the audit log path: explicit override, environment, default."""
        if override is not None:
            return Path(override).expanduser()
        if self.log_path is not None:
            return self.log_path.expanduser()
        return default_log_path()

    def bucket_dirs(self, working_dir: Path) -> Dict[Decision, Path]:
        """Absolute bucket directory for each relocating decision."""
        relative = {
            Decision.PRIVATE: self.private_dir,
            Decision.GENERAL: self.general_dir,
            Decision.DEFER: self.defer_dir,
        }
        return {
            decision: (working_dir / path).resolve()
            for decision, path in relative.items()
        }
