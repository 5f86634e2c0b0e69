"""
vault-sort: interactive one-file-at-a-time triage for a working directory.

Each file is routed into a bucket (private, general, defer), skipped, or
the previous move is undone. Every relocation is written to an
append-only audit log.
"""

from .version import __version__

__all__ = ["__version__"]
