"""
Validated console input.

This module provides:
- Line readers that re-prompt until input is valid
- Unit and yes/no choice adapters
"""

from bohrcalc.console.readers import (
    Choice,
    EndOfInputError,
    ascii_equal,
    read_bounded_int,
    read_choice,
)
from bohrcalc.console.choices import read_continue, read_energy_unit

__all__ = [
    "Choice",
    "EndOfInputError",
    "ascii_equal",
    "read_bounded_int",
    "read_choice",
    "read_continue",
    "read_energy_unit",
]
