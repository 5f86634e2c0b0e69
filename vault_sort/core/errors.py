"""Exceptions raised by vault-sort."""


class VaultSortError(Exception):
    """Base error for the project."""


class EnumerationError(VaultSortError):
    """The working directory could not be listed."""


class ActionLogError(VaultSortError):
    """The audit log could not be created or appended to."""


class MoveError(VaultSortError):
    """A relocation (or its undo) could not be completed."""


class PromptExhausted(VaultSortError):
    """A scripted prompt ran out of decisions."""
