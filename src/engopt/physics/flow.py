"""Channel-flow relations: hydraulic diameter, Reynolds number, friction and pressure drop.

All functions are pure scalar helpers shared by the heat exchanger models.
No argument checking is performed; callers keep denominators positive
through their declared bounds.
"""

from __future__ import annotations

from ..core.constants import RE_TURBULENT


def hydraulic_diameter(height: float, spacing: float) -> float:
    """Hydraulic diameter of a rectangular channel, D_h = 4A/P = 2hs/(h+s).

    Args:
        height: Channel (fin) height (m).
        spacing: Channel width / fin spacing (m).

    Returns:
        Hydraulic diameter (m).
    """
    return 2.0 * height * spacing / (height + spacing)


def offset_strip_hydraulic_diameter(
    spacing: float,
    height: float,
    strip_length: float,
    thickness: float,
) -> float:
    """Hydraulic diameter of an offset strip fin channel.

    Manglik & Bergles (1995) definition, which accounts for the exposed fin edges:

        D_h = 4 s h l / (2 (s l + h l + t h) + t s)

    Args:
        spacing: Free flow width between fins (m).
        height: Free flow height (m).
        strip_length: Length of one offset strip (m).
        thickness: Fin thickness (m).

    Returns:
        Hydraulic diameter (m).
    """
    s, h, l, t = spacing, height, strip_length, thickness
    return 4.0 * s * h * l / (2.0 * (s * l + h * l + t * h) + t * s)


def reynolds_number(density: float, velocity: float, length: float, viscosity: float) -> float:
    """Re = rho * v * L / mu."""
    return density * velocity * length / viscosity


def mean_velocity(mass_flow: float, density: float, flow_area: float) -> float:
    """Mean channel velocity from mass flow rate (m/s)."""
    return mass_flow / (density * flow_area)


def darcy_friction_factor(re: float) -> float:
    """Friction factor with a laminar/turbulent switch at Re = 4000.

    Turbulent (Re > 4000, strict): f = 0.079 Re^-0.25
    Otherwise:                     f = 64 / Re
    """
    if re > RE_TURBULENT:
        return float(0.079 * re**-0.25)
    return float(64.0 / re)


def darcy_weisbach_pressure_drop(
    friction_factor: float,
    length: float,
    d_h: float,
    density: float,
    velocity: float,
) -> float:
    """dP = f (L / D_h) rho v^2 / 2 (Pa)."""
    return friction_factor * (length / d_h) * density * velocity**2 / 2.0


def fanning_pressure_drop(
    friction_factor: float,
    length: float,
    d_h: float,
    density: float,
    velocity: float,
) -> float:
    """Core pressure drop from a Fanning friction factor, dP = 2 f L rho v^2 / D_h (Pa)."""
    return 2.0 * friction_factor * length * density * velocity**2 / d_h


def dynamic_pressure_gradient(density: float, velocity: float, d_h: float) -> float:
    """Dynamic-pressure proxy 0.5 rho v^2 / D_h used by the coarse exchanger model."""
    return 0.5 * density * velocity**2 / d_h


def manglik_bergles_f(re: float, alpha: float, delta: float, gamma: float) -> float:
    """Fanning friction factor for offset strip fins (Manglik & Bergles 1995, eq. 35).

    Args:
        re: Hydraulic-diameter Reynolds number.
        alpha: Aspect ratio s/h.
        delta: Thickness-to-strip-length ratio t/l.
        gamma: Thickness-to-spacing ratio t/s.
    """
    f1 = alpha**-0.1856 * delta**0.3053 * gamma**-0.2659
    f2 = alpha**0.920 * delta**3.767 * gamma**0.236
    return float(9.6243 * re**-0.7422 * f1 * (1.0 + 7.669e-8 * re**4.429 * f2) ** 0.1)


def pumping_power(pressure_drop: float, volumetric_flow: float, efficiency: float) -> float:
    """Shaft power to push a flow through a pressure drop (W)."""
    return pressure_drop * volumetric_flow / efficiency
