"""
Energy units for bohrcalc.

Provides the energy unit selector together with conversion and display
helpers.
"""

from enum import Enum
from typing import Union

import numpy as np

from bohrcalc.core.constants import DEFAULT_SIGNIFICANT_DIGITS, EV_TO_J_LEGACY


class EnergyUnit(Enum):
    """Unit an energy result is expressed in."""

    ELECTRON_VOLT = "eV"
    JOULE = "J"

    @property
    def suffix(self) -> str:
        """Symbol appended to a printed value."""
        return self.value


# ============================================================================
# Energy Conversions
# ============================================================================


def convert_energy(
    value: Union[float, np.ndarray],
    from_unit: EnergyUnit,
    to_unit: EnergyUnit,
    ev_to_j: float = EV_TO_J_LEGACY,
) -> Union[float, np.ndarray]:
    """
    Convert energy between units.

    Parameters
    ----------
    value : float or array
        Energy value(s) to convert
    from_unit : EnergyUnit
        Source unit
    to_unit : EnergyUnit
        Target unit
    ev_to_j : float
        Joules per electron-volt

    Returns
    -------
    float or array
        Converted energy value(s)

    Examples
    --------
    >>> convert_energy(1.0, EnergyUnit.ELECTRON_VOLT, EnergyUnit.JOULE)
    1.6e-19
    """
    if from_unit is to_unit:
        return value

    if from_unit is EnergyUnit.ELECTRON_VOLT and to_unit is EnergyUnit.JOULE:
        return value * ev_to_j
    elif from_unit is EnergyUnit.JOULE and to_unit is EnergyUnit.ELECTRON_VOLT:
        return value / ev_to_j
    else:
        raise ValueError(f"Cannot convert from {from_unit!r} to {to_unit!r}")


def format_energy(
    value: float, unit: EnergyUnit, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS
) -> str:
    """
    Render an energy with a fixed number of significant digits.

    Uses general ('g') formatting, so very small or large values switch to
    exponent notation: ``10.2eV``, ``7.74e-18J``.
    """
    return f"{value:.{significant_digits}g}{unit.suffix}"
