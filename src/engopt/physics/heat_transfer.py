"""Convective heat transfer correlations and the NTU-effectiveness method."""

from __future__ import annotations

import numpy as np


def nusselt_power_law(
    re: float,
    pr: float,
    c: float = 0.23,
    m: float = 0.8,
    n: float = 0.33,
) -> float:
    """Nu = C Re^m Pr^n (Kays & London form, default constants for offset fins)."""
    return float(c * re**m * pr**n)


def film_coefficient(nusselt: float, conductivity: float, d_h: float) -> float:
    """Convective coefficient h = Nu k / D_h (W/(m^2·K))."""
    return nusselt * conductivity / d_h


def dittus_boelter_coefficient(re: float, pr: float, conductivity: float, d_h: float) -> float:
    """Dittus-Boelter film coefficient h = 0.023 (k/D_h) Re^0.8 Pr^(1/3)."""
    return float(0.023 * (conductivity / d_h) * re**0.8 * pr ** (1.0 / 3.0))


def manglik_bergles_j(re: float, alpha: float, delta: float, gamma: float) -> float:
    """Colburn j factor for offset strip fins (Manglik & Bergles 1995, eq. 34).

    Args:
        re: Hydraulic-diameter Reynolds number.
        alpha: Aspect ratio s/h.
        delta: Thickness-to-strip-length ratio t/l.
        gamma: Thickness-to-spacing ratio t/s.
    """
    j1 = alpha**-0.1541 * delta**0.1499 * gamma**-0.0678
    j2 = alpha**0.504 * delta**0.456 * gamma**-1.055
    return float(0.6522 * re**-0.5403 * j1 * (1.0 + 5.269e-5 * re**1.340 * j2) ** 0.1)


def colburn_coefficient(j: float, re: float, conductivity: float, d_h: float) -> float:
    """Film coefficient from a Colburn factor, h = j Re k / D_h."""
    return j * re * conductivity / d_h


def overall_coefficient(h_hot: float, h_cold: float, fouling: float = 0.0) -> float:
    """Overall coefficient U from two film coefficients and a fouling resistance in series."""
    return 1.0 / (1.0 / h_hot + fouling + 1.0 / h_cold)


def series_conductance(ha_hot: float, ha_cold: float) -> float:
    """Overall conductance UA from the two sides' hA products in series (W/K)."""
    return 1.0 / (1.0 / ha_hot + 1.0 / ha_cold)


def ntu(ua: float, c_min: float) -> float:
    """Number of transfer units UA / C_min."""
    return ua / c_min


def effectiveness_single_stream(n_tu: float) -> float:
    """eps = 1 - exp(-NTU)."""
    return float(1.0 - np.exp(-n_tu))


def effectiveness_counterflow(n_tu: float, c_r: float) -> float:
    """Counterflow effectiveness.

        eps = (1 - exp(-NTU (1 - Cr))) / (1 - Cr exp(-NTU (1 - Cr)))

    For balanced streams (Cr = 1) the limit NTU / (1 + NTU) is returned.
    """
    if np.isclose(c_r, 1.0):
        return float(n_tu / (1.0 + n_tu))
    e = np.exp(-n_tu * (1.0 - c_r))
    return float((1.0 - e) / (1.0 - c_r * e))


def log_mean_temperature_difference(
    t_hot_in: float,
    t_hot_out: float,
    t_cold_in: float,
    t_cold_out: float,
) -> float:
    """Counterflow log-mean temperature difference (K)."""
    delta_t1 = t_hot_in - t_cold_out
    delta_t2 = t_hot_out - t_cold_in
    if np.isclose(delta_t1, delta_t2):
        return float(delta_t1)
    return float((delta_t1 - delta_t2) / np.log(delta_t1 / delta_t2))
