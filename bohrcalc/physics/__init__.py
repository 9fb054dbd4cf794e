"""
Bohr-model physics.

This module provides:
- Transition and result data structures
- The Bohr transition energy formula
"""

from bohrcalc.physics.bohr import EnergyResult, TransitionSpec, bohr_energy, compute_transition

__all__ = [
    "TransitionSpec",
    "EnergyResult",
    "bohr_energy",
    "compute_transition",
]
