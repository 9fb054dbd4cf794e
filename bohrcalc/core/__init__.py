"""
Core utilities.

This module provides:
- Physical constants
- Energy units and formatting
- Configuration and logging
"""

from bohrcalc.core import constants
from bohrcalc.core import units
from bohrcalc.core import config
from bohrcalc.core import logging_config
from bohrcalc.core.config import CalculatorSettings
from bohrcalc.core.units import EnergyUnit

__all__ = [
    # Modules
    "constants",
    "units",
    "config",
    "logging_config",
    # Types
    "CalculatorSettings",
    "EnergyUnit",
]
