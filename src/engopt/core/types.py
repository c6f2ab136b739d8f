"""Core types for evaluation results and fixed model inputs.

This module defines the canonical types that form the interface
between the design-evaluation models and optimizers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

import numpy as np


@dataclass(frozen=True)
class FluidProperties:
    """Constant working-fluid properties.

    Attributes:
        name: Fluid label used in diagnostics.
        density: Density (kg/m^3).
        viscosity: Dynamic viscosity (Pa·s).
        specific_heat: Specific heat at constant pressure (J/(kg·K)).
        conductivity: Thermal conductivity (W/(m·K)).
        prandtl: Prandtl number [-].
    """

    name: str
    density: float
    viscosity: float
    specific_heat: float
    conductivity: float
    prandtl: float


@dataclass
class EvalResult:
    """Result from candidate evaluation.

    Attributes:
        F: Objective values (minimize). Shape: (n_obj,)
        G: Constraint values. Convention: G <= 0 is feasible. Shape: (n_constr,)
        diag: Diagnostics dictionary with metrics, constraints and timings.
    """

    F: np.ndarray
    G: np.ndarray
    diag: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # Enforce float64
        self.F = np.asarray(self.F, dtype=np.float64)
        self.G = np.asarray(self.G, dtype=np.float64)

    @property
    def is_feasible(self) -> bool:
        """Check if all constraints are satisfied (G <= 0)."""
        return bool(np.all(self.G <= 0))

    @property
    def max_violation(self) -> float:
        """Return maximum constraint violation (0 if feasible)."""
        return float(np.maximum(self.G, 0).max()) if len(self.G) > 0 else 0.0
