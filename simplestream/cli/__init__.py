"""CLI module for simplestream.

This module provides the command-line interface for querying a Simplestream
catalog. Configuration comes from environment variables, queries from flags.
"""

from .main import cli, initialize_sentry, main, run_queries

__all__ = [
    "cli",
    "main",
    "initialize_sentry",
    "run_queries",
]
