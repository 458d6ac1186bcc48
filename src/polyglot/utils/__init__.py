"""Shared utilities: logging setup and the download retry policy."""
