"""
bohrcalc: Bohr-model electron transition energy calculator

An interactive console tool that computes the energy released by an electron
transition in a hydrogen-like atom, with the physics kernel usable on its own.
"""

__version__ = "0.1.0"

# Core imports for convenience
from bohrcalc.core import constants
from bohrcalc.core import units

__all__ = [
    "constants",
    "units",
]
