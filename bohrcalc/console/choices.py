"""
Fixed choice prompts used by the calculator.
"""

from typing import Optional, TextIO

from bohrcalc.console.readers import Choice, read_choice
from bohrcalc.core.units import EnergyUnit

ELECTRON_VOLT_NAMES = (
    "e",
    "ev",
    "electron volt",
    "electronvolt",
    "electron-volt",
    "electron volts",
    "electronvolts",
    "electron-volts",
)
JOULE_NAMES = ("j", "joule", "joules")

YES_NAMES = ("yes", "y", "true", "1")
NO_NAMES = ("no", "n", "false", "0")

ENERGY_UNIT_PROMPT = "Electron-volts or joules? ['e', 'J']:"
CONTINUE_PROMPT = "Yay, or nay? [y/n]:"


def read_energy_unit(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> EnergyUnit:
    """Ask for electron-volts or joules."""
    choice = read_choice(ENERGY_UNIT_PROMPT, ELECTRON_VOLT_NAMES, JOULE_NAMES, stream, out)
    if choice is Choice.ACCEPT:
        return EnergyUnit.ELECTRON_VOLT
    return EnergyUnit.JOULE


def read_continue(stream: Optional[TextIO] = None, out: Optional[TextIO] = None) -> bool:
    """Ask a yes/no question; True means yes."""
    return read_choice(CONTINUE_PROMPT, YES_NAMES, NO_NAMES, stream, out) is Choice.ACCEPT
