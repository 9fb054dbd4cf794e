"""
Command-line interface for bohrcalc.

This module provides the interactive calculator session and its entry point.
"""

from bohrcalc.cli.main import main, run_session

__all__ = ["main", "run_session"]
