"""Coarse coolant/air exchanger model (11 variables).

A quick screening model: both sides use the Dittus-Boelter film coefficient,
the heat duty is the proxy Q = UA * Q_total and the pressure drop is a
dynamic-pressure gradient 0.5 rho v^2 / D_h per side. It is kept as its own
model and is not meant to agree with the Manglik-Bergles exchanger in
``dual_side``.

Layout:
    x[0]  - coolant channel height (m)
    x[1]  - coolant channel width (m)
    x[2]  - coolant wall thickness (m)
    x[3]  - number of coolant channels per layer
    x[4]  - coolant mass flow rate (kg/s)
    x[5]  - air fin height (m)
    x[6]  - air fin spacing (m)
    x[7]  - air fin thickness (m)
    x[8]  - number of air channels per layer
    x[9]  - air mass flow rate (kg/s)
    x[10] - number of layers
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import asdict, dataclass, fields

import numpy as np

from ..core.constants import AIR, COOLANT, RHO_ALUMINIUM
from ..core.constraints import DUAL_HX_11_CONSTRAINTS, build_constraints
from ..core.types import EvalResult, FluidProperties
from ..physics.flow import dynamic_pressure_gradient, hydraulic_diameter, mean_velocity, reynolds_number
from ..physics.heat_transfer import dittus_boelter_coefficient, series_conductance

N_VAR = 11
OBJECTIVE_NAMES = ["weight", "neg_heat_transfer", "pressure_drop"]


@dataclass(frozen=True)
class CoolantAirHXConfig:
    """Fixed exchanger data.

    Attributes:
        coolant: Liquid-side fluid.
        air: Gas-side fluid.
        core_length: Flow length shared by both sides (m).
        material_density: Fin/wall material density (kg/m^3).
        total_heat_load: Scaling heat load of the duty proxy (W).
        max_layers: Upper limit on layer count.
        max_air_flow: Upper limit on air mass flow (kg/s).
        max_coolant_flow: Upper limit on coolant mass flow (kg/s).
        weight_norm: Divisor applied to the weight objective.
        pressure_norm: Divisor applied to the pressure-drop objective.
    """

    coolant: FluidProperties = COOLANT
    air: FluidProperties = AIR
    core_length: float = 0.4
    material_density: float = RHO_ALUMINIUM
    total_heat_load: float = 5000.0
    max_layers: float = 30.0
    max_air_flow: float = 1.2
    max_coolant_flow: float = 0.6
    weight_norm: float = 1.0
    pressure_norm: float = 1.0


@dataclass(frozen=True)
class CoolantAirHXParams:
    coolant_channel_height: float
    coolant_channel_width: float
    coolant_wall_thickness: float
    n_coolant_channels: float
    coolant_flow_rate: float
    air_fin_height: float
    air_fin_spacing: float
    air_fin_thickness: float
    n_air_channels: float
    air_flow_rate: float
    n_layers: float

    def to_array(self) -> np.ndarray:
        """Convert to flat array."""
        return np.array([getattr(self, f.name) for f in fields(self)], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: Sequence[float] | np.ndarray) -> CoolantAirHXParams:
        """Create from flat array."""
        return cls(*(float(v) for v in arr[:N_VAR]))


VAR_NAMES = [f.name for f in fields(CoolantAirHXParams)]


@dataclass
class ChannelResult:
    d_h: float
    velocity: float
    reynolds: float
    h: float
    area: float
    hA: float
    pressure_drop: float


def bounds() -> tuple[np.ndarray, np.ndarray]:
    """Return (xl, xu) for the 11-variable layout."""
    xl = np.array([0.001, 0.002, 0.0002, 5.0, 0.05, 0.004, 0.001, 0.0001, 20.0, 0.1, 2.0])
    xu = np.array([0.005, 0.020, 0.0010, 50.0, 0.8, 0.015, 0.004, 0.0004, 200.0, 1.5, 40.0])
    return xl, xu


def evaluate_channels(
    height: float,
    width: float,
    n_channels: float,
    n_layers: float,
    mass_flow: float,
    length: float,
    fluid: FluidProperties,
) -> ChannelResult:
    """Dittus-Boelter performance of one side's channel bank."""
    n_passages = n_channels * n_layers
    d_h = hydraulic_diameter(height, width)
    v = mean_velocity(mass_flow, fluid.density, height * width * n_passages)
    re = reynolds_number(fluid.density, v, d_h, fluid.viscosity)
    h = dittus_boelter_coefficient(re, fluid.prandtl, fluid.conductivity, d_h)
    area = 2.0 * (height + width) * length * n_passages
    return ChannelResult(
        d_h=d_h,
        velocity=v,
        reynolds=re,
        h=h,
        area=area,
        hA=h * area,
        pressure_drop=dynamic_pressure_gradient(fluid.density, v, d_h),
    )


def evaluate_coolant_air_hx(
    x: np.ndarray,
    total_heat_load: float | None = None,
    cfg: CoolantAirHXConfig | None = None,
) -> EvalResult:
    """Evaluate an 11-variable coolant/air design.

    Returns:
        EvalResult with:
            F: [weight / weight_norm, -UA*Q_total, pressure drop / pressure_norm]
            G: [n_layers - max, air flow - max, coolant flow - max]
    """
    cfg = cfg or CoolantAirHXConfig()
    q_total = cfg.total_heat_load if total_heat_load is None else float(total_heat_load)
    p = CoolantAirHXParams.from_array(x)
    L = cfg.core_length

    coolant = evaluate_channels(
        p.coolant_channel_height,
        p.coolant_channel_width,
        p.n_coolant_channels,
        p.n_layers,
        p.coolant_flow_rate,
        L,
        cfg.coolant,
    )
    air = evaluate_channels(
        p.air_fin_height,
        p.air_fin_spacing,
        p.n_air_channels,
        p.n_layers,
        p.air_flow_rate,
        L,
        cfg.air,
    )

    ua = series_conductance(coolant.hA, air.hA)
    q = ua * q_total
    dp = coolant.pressure_drop + air.pressure_drop

    coolant_volume = L * p.coolant_channel_width * p.coolant_wall_thickness * p.n_coolant_channels * p.n_layers
    air_volume = L * p.air_fin_height * p.air_fin_thickness * p.n_air_channels * p.n_layers
    weight = (coolant_volume + air_volume) * cfg.material_density

    F = np.array([weight / cfg.weight_norm, -q, dp / cfg.pressure_norm], dtype=np.float64)
    G, constraint_diag = build_constraints(
        [
            p.n_layers - cfg.max_layers,
            p.air_flow_rate - cfg.max_air_flow,
            p.coolant_flow_rate - cfg.max_coolant_flow,
        ],
        DUAL_HX_11_CONSTRAINTS,
    )

    diag = {
        "metrics": {
            "heat_transfer": q,
            "weight": weight,
            "pressure_drop": dp,
            "UA": ua,
            "total_heat_load": q_total,
        },
        "sides": {"coolant": asdict(coolant), "air": asdict(air)},
        "constraints": constraint_diag,
    }
    return EvalResult(F=F, G=G, diag=diag)
