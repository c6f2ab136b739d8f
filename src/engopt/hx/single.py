"""Offset-fin heat exchanger with a single shared fin geometry.

Both streams (hot oil, cold air) flow through channels of the same fin
height, spacing and thickness. Film coefficients use the Kays & London power
law Nu = C Re^m Pr^n, the exchanger is rated with the single-stream
NTU-effectiveness relation, and pumping power follows from a Darcy-Weisbach
pressure drop per stream.

The heat-deficit constraint is computed from its own, simpler estimate
(fin-face area only, inlet temperature difference) and is intentionally not
reconciled with the objective's heat duty.

Layout:
    x[0] - fin height (m)
    x[1] - fin spacing (m)
    x[2] - fin thickness (m)
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass

import numpy as np

from ..core.constants import AIR, MIN_PRESSURE_DROP, OIL, RHO_ALUMINIUM, ZERO_POWER_FLOOR
from ..core.constraints import SINGLE_HX_CONSTRAINTS, build_constraints
from ..core.types import EvalResult, FluidProperties
from ..physics.flow import (
    darcy_friction_factor,
    darcy_weisbach_pressure_drop,
    hydraulic_diameter,
    mean_velocity,
    pumping_power,
    reynolds_number,
)
from ..physics.heat_transfer import (
    effectiveness_single_stream,
    film_coefficient,
    log_mean_temperature_difference,
    ntu,
    nusselt_power_law,
    overall_coefficient,
)

N_VAR = 3
VAR_NAMES = ["fin_height", "fin_spacing", "fin_thickness"]
OBJECTIVE_NAMES = ["neg_heat_transfer", "weight", "pumping_power"]


@dataclass(frozen=True)
class SingleHXConfig:
    """Fixed exchanger data.

    Attributes:
        hot_fluid: Hot-stream properties.
        cold_fluid: Cold-stream properties.
        m_dot_hot: Hot mass flow (kg/s).
        m_dot_cold: Cold mass flow (kg/s).
        length: Flow length of the core (m).
        width: Core width across the fins (m).
        n_rows: Fin rows per stream.
        fouling: Combined fouling resistance (m^2·K/W).
        t_hot_in, t_hot_out, t_cold_in, t_cold_out: Terminal temperatures (°C).
        material_density: Fin material density (kg/m^3).
        pump_efficiency: Fan/pump efficiency [-].
        required_heat_transfer: Heat duty the design must deliver (W).
        nu_c, nu_m, nu_n: Nusselt power-law constants.
    """

    hot_fluid: FluidProperties = OIL
    cold_fluid: FluidProperties = AIR
    m_dot_hot: float = 0.3
    m_dot_cold: float = 0.4
    length: float = 0.4
    width: float = 0.3
    n_rows: int = 8
    fouling: float = 2.0e-4
    t_hot_in: float = 90.0
    t_hot_out: float = 70.0
    t_cold_in: float = 25.0
    t_cold_out: float = 40.0
    material_density: float = RHO_ALUMINIUM
    pump_efficiency: float = 0.7
    required_heat_transfer: float = 10_000.0
    nu_c: float = 0.23
    nu_m: float = 0.8
    nu_n: float = 0.33


@dataclass(frozen=True)
class SingleHXParams:
    """Shared fin geometry."""

    fin_height: float
    fin_spacing: float
    fin_thickness: float

    def to_array(self) -> np.ndarray:
        """Convert to flat array."""
        return np.array([self.fin_height, self.fin_spacing, self.fin_thickness], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: Sequence[float] | np.ndarray) -> SingleHXParams:
        """Create from flat array."""
        return cls(fin_height=float(arr[0]), fin_spacing=float(arr[1]), fin_thickness=float(arr[2]))


@dataclass
class StreamState:
    """Per-stream hydraulic and thermal state."""

    velocity: float
    reynolds: float
    nusselt: float
    h: float
    friction_factor: float
    pressure_drop: float
    power: float


def bounds() -> tuple[np.ndarray, np.ndarray]:
    """Return (xl, xu) for [fin_height, fin_spacing, fin_thickness] in metres."""
    xl = np.array([0.005, 0.001, 0.0001])
    xu = np.array([0.02, 0.005, 0.0005])
    return xl, xu


def _stream(
    fluid: FluidProperties,
    m_dot: float,
    flow_area: float,
    d_h: float,
    cfg: SingleHXConfig,
) -> StreamState:
    v = mean_velocity(m_dot, fluid.density, flow_area)
    re = reynolds_number(fluid.density, v, d_h, fluid.viscosity)
    nu = nusselt_power_law(re, fluid.prandtl, cfg.nu_c, cfg.nu_m, cfg.nu_n)
    h = film_coefficient(nu, fluid.conductivity, d_h)

    f = darcy_friction_factor(re)
    dp = darcy_weisbach_pressure_drop(f, cfg.length, d_h, fluid.density, v)
    if dp <= 0.0:
        dp = MIN_PRESSURE_DROP
    power = pumping_power(dp, m_dot / fluid.density, cfg.pump_efficiency)

    return StreamState(
        velocity=v,
        reynolds=re,
        nusselt=nu,
        h=h,
        friction_factor=f,
        pressure_drop=dp,
        power=power,
    )


def estimate_heat_transfer(
    params: SingleHXParams,
    u: float,
    c_min: float,
    n_channels: float,
    cfg: SingleHXConfig,
) -> float:
    """Heat duty estimate used only by the heat-deficit constraint (W).

    Counts fin-face area only and rates against the inlet temperature
    difference.
    """
    area = 2.0 * params.fin_height * cfg.length * n_channels * cfg.n_rows
    eff = effectiveness_single_stream(ntu(u * area, c_min))
    return eff * c_min * (cfg.t_hot_in - cfg.t_cold_in)


def evaluate_single_hx(x: np.ndarray, cfg: SingleHXConfig | None = None) -> EvalResult:
    """Evaluate a fin geometry.

    Args:
        x: [fin_height, fin_spacing, fin_thickness] (m).
        cfg: Fixed exchanger data.

    Returns:
        EvalResult with:
            F: [-Q, weight, pumping power]
            G: [max(0, Q_required - Q_estimate)]
            diag: per-stream states and intermediate quantities
    """
    cfg = cfg or SingleHXConfig()
    p = SingleHXParams.from_array(x)
    hgt, s, t = p.fin_height, p.fin_spacing, p.fin_thickness

    d_h = hydraulic_diameter(hgt, s)
    n_channels = cfg.width / (s + t)
    flow_area = n_channels * cfg.n_rows * hgt * s

    hot = _stream(cfg.hot_fluid, cfg.m_dot_hot, flow_area, d_h, cfg)
    cold = _stream(cfg.cold_fluid, cfg.m_dot_cold, flow_area, d_h, cfg)

    u = overall_coefficient(hot.h, cold.h, cfg.fouling)
    area = 2.0 * (hgt + s) * cfg.length * n_channels * cfg.n_rows
    c_min = min(cfg.m_dot_hot * cfg.hot_fluid.specific_heat, cfg.m_dot_cold * cfg.cold_fluid.specific_heat)
    n_tu = ntu(u * area, c_min)
    eff = effectiveness_single_stream(n_tu)
    lmtd = log_mean_temperature_difference(cfg.t_hot_in, cfg.t_hot_out, cfg.t_cold_in, cfg.t_cold_out)
    q = eff * c_min * lmtd

    power = hot.power + cold.power
    if power == 0.0:
        power = ZERO_POWER_FLOOR

    fin_volume = t * hgt * cfg.length * n_channels * cfg.n_rows * 2
    weight = fin_volume * cfg.material_density

    q_est = estimate_heat_transfer(p, u, c_min, n_channels, cfg)
    deficit = max(0.0, cfg.required_heat_transfer - q_est)
    G, constraint_diag = build_constraints([deficit], SINGLE_HX_CONSTRAINTS)

    F = np.array([-q, weight, power], dtype=np.float64)

    diag = {
        "metrics": {
            "heat_transfer": q,
            "heat_transfer_estimate": q_est,
            "weight": weight,
            "pumping_power": power,
            "d_h": d_h,
            "n_channels": n_channels,
            "area": area,
            "U": u,
            "NTU": n_tu,
            "effectiveness": eff,
            "lmtd": lmtd,
            "c_min": c_min,
        },
        "streams": {"hot": asdict(hot), "cold": asdict(cold)},
        "constraints": constraint_diag,
    }
    return EvalResult(F=F, G=G, diag=diag)
