"""Version information for vault-sort."""

import platform

__version__ = "1.0.0"


def get_version_string() -> str:
    """Get formatted version string including the interpreter version.

    Returns:
        Version string like "vault-sort 1.0.0 (Python 3.12.1)"
    """
    return f"vault-sort {__version__} (Python {platform.python_version()})"
