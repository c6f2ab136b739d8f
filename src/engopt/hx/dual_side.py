"""Counterflow offset-strip-fin exchanger with independent hot and cold sides.

Each side carries its own fin geometry, channel/layer counts and face
velocity. Side performance follows the Manglik & Bergles (1995) offset strip
fin correlations; the two sides are combined in series to an overall UA and
rated with the counterflow NTU-effectiveness relation against a fixed inlet
temperature spread.

Layout (9 variables per side, hot side first):
    x[0:9]   - hot side   (SideGeometry)
    x[9:18]  - cold side  (SideGeometry)

SideGeometry order:
    fin_height, fin_spacing, fin_thickness, fin_length,
    length, width, n_channels, n_layers, velocity

The model performs no guarding: bounds keep every length, count and velocity
strictly positive.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass

import numpy as np

from ..core.constants import AIR, COOLANT, RHO_ALUMINIUM
from ..core.constraints import DUAL_HX_18_CONSTRAINTS, build_constraints
from ..core.types import EvalResult, FluidProperties
from ..physics.flow import (
    fanning_pressure_drop,
    manglik_bergles_f,
    offset_strip_hydraulic_diameter,
    reynolds_number,
)
from ..physics.heat_transfer import (
    colburn_coefficient,
    effectiveness_counterflow,
    manglik_bergles_j,
    ntu,
    series_conductance,
)

N_SIDE = 9
N_VAR = 2 * N_SIDE

SIDE_FIELDS = [
    "fin_height",
    "fin_spacing",
    "fin_thickness",
    "fin_length",
    "length",
    "width",
    "n_channels",
    "n_layers",
    "velocity",
]
VAR_NAMES = [f"hot_{n}" for n in SIDE_FIELDS] + [f"cold_{n}" for n in SIDE_FIELDS]
OBJECTIVE_NAMES = ["weight", "neg_heat_transfer", "pressure_drop"]


@dataclass(frozen=True)
class DualSideHXConfig:
    """Fixed exchanger data.

    Attributes:
        hot_fluid: Hot-side fluid.
        cold_fluid: Cold-side fluid.
        t_hot_in: Hot inlet temperature (°C).
        t_cold_in: Cold inlet temperature (°C).
        material_density: Fin material density (kg/m^3).
        total_heat_load: Heat load the duty may not exceed (W).
        weight_limit: Maximum weight (kg).
        pressure_drop_limit: Maximum summed pressure drop (Pa).
        weight_norm: Divisor applied to the weight objective.
        pressure_norm: Divisor applied to the pressure-drop objective.
    """

    hot_fluid: FluidProperties = COOLANT
    cold_fluid: FluidProperties = AIR
    t_hot_in: float = 50.0
    t_cold_in: float = 20.0
    material_density: float = RHO_ALUMINIUM
    total_heat_load: float = 5000.0
    weight_limit: float = 20.0
    pressure_drop_limit: float = 250.0
    weight_norm: float = 1.0
    pressure_norm: float = 1.0


@dataclass(frozen=True)
class SideGeometry:
    """Fin geometry, counts and face velocity for one side."""

    fin_height: float
    fin_spacing: float
    fin_thickness: float
    fin_length: float
    length: float
    width: float
    n_channels: float
    n_layers: float
    velocity: float

    def to_array(self) -> np.ndarray:
        """Convert to flat array."""
        return np.array([getattr(self, n) for n in SIDE_FIELDS], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: Sequence[float] | np.ndarray) -> SideGeometry:
        """Create from flat array."""
        return cls(**{n: float(v) for n, v in zip(SIDE_FIELDS, arr)})


@dataclass(frozen=True)
class DualSideHXParams:
    """Complete 18-variable design."""

    hot: SideGeometry
    cold: SideGeometry

    def to_array(self) -> np.ndarray:
        """Convert to flat array."""
        return np.concatenate([self.hot.to_array(), self.cold.to_array()])

    @classmethod
    def from_array(cls, arr: Sequence[float] | np.ndarray) -> DualSideHXParams:
        """Create from flat array."""
        arr = np.asarray(arr, dtype=np.float64)
        return cls(
            hot=SideGeometry.from_array(arr[:N_SIDE]),
            cold=SideGeometry.from_array(arr[N_SIDE:N_VAR]),
        )


@dataclass
class SideResult:
    """Per-side thermal-hydraulic state."""

    d_h: float
    reynolds: float
    j: float
    f: float
    h: float
    area: float
    hA: float
    mass_flow: float
    capacity_rate: float
    pressure_drop: float
    fin_volume: float


def bounds() -> tuple[np.ndarray, np.ndarray]:
    """Return (xl, xu) for the 18-variable layout (SI units, counts as reals)."""
    # fin_height, fin_spacing, fin_thickness, fin_length, length, width, n_channels, n_layers, velocity
    hot_lb = np.array([0.002, 0.001, 0.0001, 0.002, 0.1, 0.005, 10.0, 2.0, 0.05])
    hot_ub = np.array([0.010, 0.004, 0.0004, 0.010, 0.5, 0.030, 100.0, 20.0, 1.0])

    cold_lb = np.array([0.004, 0.001, 0.0001, 0.002, 0.1, 0.005, 10.0, 2.0, 1.0])
    cold_ub = np.array([0.015, 0.004, 0.0004, 0.010, 0.5, 0.030, 100.0, 20.0, 12.0])

    xl = np.concatenate([hot_lb, cold_lb])
    xu = np.concatenate([hot_ub, cold_ub])
    return xl, xu


def evaluate_side(side: SideGeometry, fluid: FluidProperties) -> SideResult:
    """Manglik-Bergles performance of one side."""
    hgt, s, t, l = side.fin_height, side.fin_spacing, side.fin_thickness, side.fin_length
    n_passages = side.n_channels * side.n_layers

    d_h = offset_strip_hydraulic_diameter(s, hgt, l, t)
    re = reynolds_number(fluid.density, side.velocity, d_h, fluid.viscosity)

    alpha = s / hgt
    delta = t / l
    gamma = t / s
    j = manglik_bergles_j(re, alpha, delta, gamma)
    f = manglik_bergles_f(re, alpha, delta, gamma)

    h = colburn_coefficient(j, re, fluid.conductivity, d_h)
    area = 2.0 * (hgt + s) * side.length * n_passages
    mass_flow = fluid.density * side.velocity * s * hgt * n_passages

    return SideResult(
        d_h=d_h,
        reynolds=re,
        j=j,
        f=f,
        h=h,
        area=area,
        hA=h * area,
        mass_flow=mass_flow,
        capacity_rate=mass_flow * fluid.specific_heat,
        pressure_drop=fanning_pressure_drop(f, side.length, d_h, fluid.density, side.velocity),
        fin_volume=side.length * side.width * t * n_passages,
    )


def evaluate_dual_side_hx(
    x: np.ndarray,
    total_heat_load: float | None = None,
    cfg: DualSideHXConfig | None = None,
) -> EvalResult:
    """Evaluate an 18-variable counterflow design.

    Args:
        x: Flat design vector (hot side then cold side).
        total_heat_load: Heat load cap (W); falls back to ``cfg.total_heat_load``.
        cfg: Fixed exchanger data.

    Returns:
        EvalResult with:
            F: [weight / weight_norm, -Q, pressure drop / pressure_norm]
            G: [weight - limit, pressure drop - limit, Q - total heat load]
    """
    cfg = cfg or DualSideHXConfig()
    q_total = cfg.total_heat_load if total_heat_load is None else float(total_heat_load)
    p = DualSideHXParams.from_array(x)

    hot = evaluate_side(p.hot, cfg.hot_fluid)
    cold = evaluate_side(p.cold, cfg.cold_fluid)

    ua = series_conductance(hot.hA, cold.hA)
    c_min = min(hot.capacity_rate, cold.capacity_rate)
    c_max = max(hot.capacity_rate, cold.capacity_rate)
    c_r = c_min / c_max
    n_tu = ntu(ua, c_min)
    eff = effectiveness_counterflow(n_tu, c_r)
    q = eff * c_min * (cfg.t_hot_in - cfg.t_cold_in)

    dp = hot.pressure_drop + cold.pressure_drop
    weight = (hot.fin_volume + cold.fin_volume) * cfg.material_density

    F = np.array([weight / cfg.weight_norm, -q, dp / cfg.pressure_norm], dtype=np.float64)
    G, constraint_diag = build_constraints(
        [weight - cfg.weight_limit, dp - cfg.pressure_drop_limit, q - q_total],
        DUAL_HX_18_CONSTRAINTS,
    )

    diag = {
        "metrics": {
            "heat_transfer": q,
            "weight": weight,
            "pressure_drop": dp,
            "UA": ua,
            "NTU": n_tu,
            "C_r": c_r,
            "c_min": c_min,
            "effectiveness": eff,
            "total_heat_load": q_total,
        },
        "sides": {"hot": asdict(hot), "cold": asdict(cold)},
        "constraints": constraint_diag,
    }
    return EvalResult(F=F, G=G, diag=diag)
