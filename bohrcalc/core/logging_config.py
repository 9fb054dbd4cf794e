"""
Logging configuration for bohrcalc.

Log records go to stderr so they stay apart from the calculator's prompts
on stdout.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "[%(asctime)s] %(name)s - %(levelname)s - %(message)s"


def setup_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """
    Configure logging for bohrcalc.

    Parameters
    ----------
    level : str
        Logging level: 'DEBUG', 'INFO', 'WARNING' or 'ERROR'
    stream : file-like object, optional
        Stream to write logs to. If None, uses sys.stderr.
    """
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format=LOG_FORMAT,
        stream=sys.stderr if stream is None else stream,
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module path relative to the package, e.g. 'cli.main'."""
    return logging.getLogger(f"bohrcalc.{name}")
