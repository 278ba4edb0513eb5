"""Command line entry points for file-utilities."""
