"""
Electron transition energies in hydrogen-like atoms.

The Bohr model gives the energy of level n of a single-electron ion with
nuclear charge Z as

    E_n = -R * Z^2 / n^2

so an electron dropping from n_initial to n_final releases

    E = R * Z^2 * (1/n_final^2 - 1/n_initial^2)

which is positive whenever n_initial > n_final.
"""

from dataclasses import dataclass
from typing import Optional, Union

import numpy as np

from bohrcalc.core.config import CalculatorSettings
from bohrcalc.core.constants import DEFAULT_SIGNIFICANT_DIGITS, EV_TO_J_LEGACY, RYDBERG_EV
from bohrcalc.core.logging_config import get_logger
from bohrcalc.core.units import EnergyUnit, convert_energy, format_energy

logger = get_logger("physics.bohr")

ArrayLike = Union[int, float, np.ndarray]


@dataclass(frozen=True)
class TransitionSpec:
    """
    An electron transition in a hydrogen-like atom.

    Attributes
    ----------
    atomic_number : int
        Nuclear charge Z
    n_initial : int
        Principal quantum number of the starting level
    n_final : int
        Principal quantum number of the final level
    """

    atomic_number: int
    n_initial: int
    n_final: int

    @property
    def is_ordered(self) -> bool:
        """True unless the electron would move to a higher level."""
        return self.n_initial >= self.n_final

    def __str__(self) -> str:
        return f"({self.atomic_number}, {self.n_initial}, {self.n_final})"


@dataclass(frozen=True)
class EnergyResult:
    """Energy of a transition in the unit it was requested in."""

    transition: TransitionSpec
    value: float
    unit: EnergyUnit

    def formatted(self, significant_digits: int = DEFAULT_SIGNIFICANT_DIGITS) -> str:
        return format_energy(self.value, self.unit, significant_digits)


def bohr_energy(
    Z: ArrayLike,
    n_initial: ArrayLike,
    n_final: ArrayLike,
    unit: EnergyUnit = EnergyUnit.ELECTRON_VOLT,
    rydberg_ev: float = RYDBERG_EV,
    ev_to_j: float = EV_TO_J_LEGACY,
) -> Union[float, np.ndarray]:
    """
    Energy released by an electron transition using the Bohr model.

    Parameters
    ----------
    Z : int or array
        Atomic number (nuclear charge)
    n_initial : int or array
        Initial principal quantum number
    n_final : int or array
        Final principal quantum number
    unit : EnergyUnit
        Unit of the returned energy
    rydberg_ev : float
        Rydberg energy in eV
    ev_to_j : float
        Joules per eV applied when ``unit`` is JOULE

    Returns
    -------
    float or array
        Transition energy; a float when all inputs are scalars

    Examples
    --------
    >>> round(bohr_energy(1, 2, 1), 4)
    10.2043
    """
    if not isinstance(unit, EnergyUnit):
        raise ValueError(f"unit must be an EnergyUnit, got {unit!r}")

    z = np.asarray(Z, dtype=float)
    n_i = np.asarray(n_initial, dtype=float)
    n_f = np.asarray(n_final, dtype=float)

    energy = rydberg_ev * z**2.0 * (1.0 / n_f**2.0 - 1.0 / n_i**2.0)
    energy = convert_energy(energy, EnergyUnit.ELECTRON_VOLT, unit, ev_to_j=ev_to_j)

    if np.ndim(energy) == 0:
        return float(energy)
    return energy


def compute_transition(
    spec: TransitionSpec, unit: EnergyUnit, settings: Optional[CalculatorSettings] = None
) -> EnergyResult:
    """
    Evaluate :func:`bohr_energy` for a transition.

    Parameters
    ----------
    spec : TransitionSpec
        Transition to evaluate
    unit : EnergyUnit
        Requested unit
    settings : CalculatorSettings, optional
        Constants to use; defaults when None

    Returns
    -------
    EnergyResult
    """
    if settings is None:
        settings = CalculatorSettings()

    value = bohr_energy(
        spec.atomic_number,
        spec.n_initial,
        spec.n_final,
        unit,
        rydberg_ev=settings.rydberg_ev,
        ev_to_j=settings.ev_to_joule,
    )
    logger.debug(f"Transition {spec}: E = {value!r} {unit.suffix}")
    return EnergyResult(transition=spec, value=value, unit=unit)
