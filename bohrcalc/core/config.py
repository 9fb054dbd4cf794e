"""
Configuration management for bohrcalc.

Loads optional YAML/JSON settings files that override the physical constants
and display precision used by the calculator. Settings are only ever read.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Union

import yaml

from bohrcalc.core.constants import DEFAULT_SIGNIFICANT_DIGITS, EV_TO_J_LEGACY, RYDBERG_EV

logger = logging.getLogger(__name__)

CALCULATOR_KEYS = ("rydberg_ev", "ev_to_joule", "significant_digits")


@dataclass(frozen=True)
class CalculatorSettings:
    """
    Constants and display options for a calculator session.

    Attributes
    ----------
    rydberg_ev : float
        Rydberg energy in eV
    ev_to_joule : float
        Joules per electron-volt used for results in joules
    significant_digits : int
        Significant digits shown for reported energies
    """

    rydberg_ev: float = RYDBERG_EV
    ev_to_joule: float = EV_TO_J_LEGACY
    significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load configuration from YAML or JSON file.

    Parameters
    ----------
    config_path : str or Path
        Path to configuration file (.yaml, .yml, or .json)

    Returns
    -------
    dict
        Configuration dictionary

    Raises
    ------
    FileNotFoundError
        If config file does not exist
    ValueError
        If file format is not supported or the file is empty
    """
    config_path = Path(config_path)

    if not config_path.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    suffix = config_path.suffix.lower()

    with open(config_path, "r") as f:
        if suffix in [".yaml", ".yml"]:
            config = yaml.safe_load(f)
        elif suffix == ".json":
            config = json.load(f)
        else:
            raise ValueError(
                f"Unsupported config file format: {suffix}. " "Use .yaml, .yml, or .json"
            )

    if not isinstance(config, dict):
        raise ValueError(f"Configuration file must contain a mapping: {config_path}")

    logger.info(f"Loaded configuration from {config_path}")
    return config


def validate_calculator_config(config: Dict[str, Any]) -> bool:
    """
    Validate calculator configuration structure.

    Parameters
    ----------
    config : dict
        Configuration dictionary

    Returns
    -------
    bool
        True if valid

    Raises
    ------
    ValueError
        If configuration is invalid
    """
    if "calculator" not in config:
        raise ValueError("Configuration must contain 'calculator' section")

    calc = config["calculator"]
    if calc is None:
        return True
    if not isinstance(calc, dict):
        raise ValueError("'calculator' section must be a mapping")

    unknown = sorted(set(calc) - set(CALCULATOR_KEYS))
    if unknown:
        raise ValueError(
            f"Unknown calculator setting(s): {unknown}. " f"Must be one of: {list(CALCULATOR_KEYS)}"
        )

    for field in ("rydberg_ev", "ev_to_joule"):
        if field in calc:
            value = calc[field]
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ValueError(f"Calculator setting '{field}' must be a number, got {value!r}")
            if value <= 0:
                raise ValueError(f"Calculator setting '{field}' must be positive")

    if "significant_digits" in calc:
        digits = calc["significant_digits"]
        if isinstance(digits, bool) or not isinstance(digits, int):
            raise ValueError(f"'significant_digits' must be an integer, got {digits!r}")
        if not 1 <= digits <= 17:
            raise ValueError("'significant_digits' must be between 1 and 17")

    return True


def settings_from_config(config: Dict[str, Any]) -> CalculatorSettings:
    """
    Build calculator settings from a validated configuration dictionary.

    Keys missing from the 'calculator' section keep their defaults.
    """
    validate_calculator_config(config)
    calc = config["calculator"] or {}
    defaults = CalculatorSettings()
    return CalculatorSettings(
        rydberg_ev=float(calc.get("rydberg_ev", defaults.rydberg_ev)),
        ev_to_joule=float(calc.get("ev_to_joule", defaults.ev_to_joule)),
        significant_digits=int(calc.get("significant_digits", defaults.significant_digits)),
    )
