"""Heat exchanger module: fin/channel geometry evaluation models."""

from .coolant_air import CoolantAirHXConfig, evaluate_coolant_air_hx
from .dual_side import DualSideHXConfig, evaluate_dual_side_hx
from .single import SingleHXConfig, evaluate_single_hx

__all__ = [
    "CoolantAirHXConfig",
    "DualSideHXConfig",
    "SingleHXConfig",
    "evaluate_coolant_air_hx",
    "evaluate_dual_side_hx",
    "evaluate_single_hx",
]
