"""Core constants for engopt.

This module defines system-wide invariants such as:
- Model version strings (recorded in archives)
- Penalty and floor values shared by the evaluation models
- Material and fluid reference values
"""

from __future__ import annotations

from .types import FluidProperties

# Model Versioning for Archives
# Update these when the underlying physics logic changes
MODEL_VERSION_LINKAGE = "v1.0_20261019_fourbar"
MODEL_VERSION_SINGLE_HX = "v1.0_20261019_kays_london"
MODEL_VERSION_DUAL_HX_18 = "v1.0_20261019_manglik_bergles"
MODEL_VERSION_DUAL_HX_11 = "v1.0_20261019_dittus_boelter"

# Penalty / floor values
LINKAGE_PENALTY = 1000.0
LINKAGE_MIN_ANGLE_DIFF_DEG = 5.0
LINKAGE_OFFSET_DEG = 77.0  # follower pivot offset
MIN_PRESSURE_DROP = 1e-6  # Pa
ZERO_POWER_FLOOR = 1.0  # W

# Friction-factor regime switch (Darcy, strict ">" selects turbulent)
RE_TURBULENT = 4000.0

# Materials
RHO_ALUMINIUM = 2700.0  # kg/m^3

# Working fluids (near 300 K)
AIR = FluidProperties(
    name="air",
    density=1.184,
    viscosity=1.849e-5,
    specific_heat=1007.0,
    conductivity=0.02551,
    prandtl=0.7296,
)

OIL = FluidProperties(
    name="oil",
    density=870.0,
    viscosity=0.0268,
    specific_heat=1964.0,
    conductivity=0.145,
    prandtl=363.0,
)

COOLANT = FluidProperties(
    name="coolant",  # 50/50 ethylene glycol-water
    density=1065.0,
    viscosity=0.0034,
    specific_heat=3350.0,
    conductivity=0.402,
    prandtl=28.3,
)
