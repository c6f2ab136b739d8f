"""Physics module: shared flow and heat transfer correlations."""

from .flow import (
    darcy_friction_factor,
    darcy_weisbach_pressure_drop,
    dynamic_pressure_gradient,
    fanning_pressure_drop,
    hydraulic_diameter,
    manglik_bergles_f,
    mean_velocity,
    offset_strip_hydraulic_diameter,
    pumping_power,
    reynolds_number,
)
from .heat_transfer import (
    colburn_coefficient,
    dittus_boelter_coefficient,
    effectiveness_counterflow,
    effectiveness_single_stream,
    film_coefficient,
    log_mean_temperature_difference,
    manglik_bergles_j,
    ntu,
    nusselt_power_law,
    overall_coefficient,
    series_conductance,
)

__all__ = [
    "colburn_coefficient",
    "darcy_friction_factor",
    "darcy_weisbach_pressure_drop",
    "dittus_boelter_coefficient",
    "dynamic_pressure_gradient",
    "effectiveness_counterflow",
    "effectiveness_single_stream",
    "fanning_pressure_drop",
    "film_coefficient",
    "hydraulic_diameter",
    "log_mean_temperature_difference",
    "manglik_bergles_f",
    "manglik_bergles_j",
    "mean_velocity",
    "ntu",
    "nusselt_power_law",
    "offset_strip_hydraulic_diameter",
    "overall_coefficient",
    "pumping_power",
    "reynolds_number",
    "series_conductance",
]
