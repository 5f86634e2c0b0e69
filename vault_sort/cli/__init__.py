"""Command line interface for vault-sort."""
