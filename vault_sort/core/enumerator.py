"""
File enumeration for the sort loop.

The working directory is listed exactly once, before any prompting; the
resulting sequence never changes during a run.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional, Tuple

from .errors import EnumerationError

logger = logging.getLogger(__name__)


def list_work_items(
    directory: Path,
    include_hidden: bool = True,
    exclude: Optional[Iterable[Path]] = None,
) -> Tuple[str, ...]:
    """
    List the regular files directly inside a directory.

    Args:
        directory: Directory to list
        include_hidden: Whether dot-files are offered
        exclude: Paths to leave out (e.g. the audit log itself)

    Returns:
        File names sorted by name

    Raises:
        EnumerationError: If the directory cannot be read
    """
    directory = Path(directory)
    excluded = {Path(p).resolve() for p in (exclude or [])}

    names = []
    try:
        for entry in directory.iterdir():
            # is_file() follows symlinks, so links to directories are dropped
            if not entry.is_file():
                continue
            if not include_hidden and entry.name.startswith("."):
                continue
            if entry.resolve() in excluded:
                logger.debug(f"Excluding {entry}")
                continue
            names.append(entry.name)
    except OSError as e:
        raise EnumerationError(f"Unable to read directory {directory}: {e}") from e

    names.sort()
    logger.debug(f"Found {len(names)} files in {directory}")
    return tuple(names)
