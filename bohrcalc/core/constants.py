"""
Physical constants for Bohr-model calculations.

Energies are in electron-volts unless otherwise specified.
"""

# ============================================================================
# Atomic Physics Constants
# ============================================================================

# Rydberg energy (hydrogen ionization energy for an infinite nuclear mass)
RYDBERG_EV = 13.60569300984  # eV

# ============================================================================
# Conversion Factors
# ============================================================================

# eV to J factor used for reported results. Rounded to two significant
# figures (CODATA elementary charge is 1.602176634e-19 C); results in
# joules are printed with this value.
EV_TO_J_LEGACY = 1.6e-19  # J/eV

# ============================================================================
# Display
# ============================================================================

# Digits shown when reporting an energy
DEFAULT_SIGNIFICANT_DIGITS = 3
