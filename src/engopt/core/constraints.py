"""Centralized constraint naming, assembly and scaling."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import numpy as np

# Default per-constraint scaling. Raw "(value - limit)" magnitudes are kept
# unless an override is supplied.
DEFAULT_SCALES: dict[str, float] = {
    "single_heat_deficit": 1.0,  # W
    "dual18_weight_max": 1.0,  # kg
    "dual18_pressure_drop_max": 1.0,  # Pa
    "dual18_heat_load_max": 1.0,  # W
    "dual11_layers_max": 1.0,
    "dual11_air_flow_max": 1.0,  # kg/s
    "dual11_coolant_flow_max": 1.0,  # kg/s
}

LINKAGE_CONSTRAINTS: list[str] = []

SINGLE_HX_CONSTRAINTS = ["single_heat_deficit"]

DUAL_HX_18_CONSTRAINTS = [
    "dual18_weight_max",
    "dual18_pressure_drop_max",
    "dual18_heat_load_max",
]

DUAL_HX_11_CONSTRAINTS = [
    "dual11_layers_max",
    "dual11_air_flow_max",
    "dual11_coolant_flow_max",
]

_BY_MODEL = {
    "linkage": LINKAGE_CONSTRAINTS,
    "single_hx": SINGLE_HX_CONSTRAINTS,
    "dual_hx_18": DUAL_HX_18_CONSTRAINTS,
    "dual_hx_11": DUAL_HX_11_CONSTRAINTS,
}


def get_constraint_names(model: str) -> list[str]:
    """Return ordered constraint names for a model key."""
    return list(_BY_MODEL[model])


def get_constraint_scales() -> dict[str, float]:
    """Expose default constraint scales for downstream metadata."""
    return DEFAULT_SCALES.copy()


@dataclass
class ConstraintRecord:
    name: str
    raw: float
    scale: float
    scaled: float

    @property
    def feasible(self) -> bool:
        return self.scaled <= 0.0

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "raw": self.raw,
            "scale": self.scale,
            "scaled": self.scaled,
            "feasible": self.feasible,
        }


def build_constraints(
    values: Sequence[float],
    names: Sequence[str],
    scale_overrides: Mapping[str, float] | None = None,
) -> tuple[np.ndarray, list[dict]]:
    """Assemble a constraint vector with scaling and per-constraint records.

    Returns:
        G_scaled: np.ndarray with sign convention G<=0 feasible.
        diag_list: list of dicts with raw/scaled/name.
    """
    scale_overrides = scale_overrides or {}

    if len(names) != len(values):
        raise ValueError(
            f"Constraint name/value length mismatch: {len(names)} names vs {len(values)} values"
        )

    G_scaled = np.zeros(len(values), dtype=np.float64)
    diag_list: list[dict] = []

    for i, (name, raw) in enumerate(zip(names, values)):
        scale = float(scale_overrides.get(name, DEFAULT_SCALES.get(name, 1.0)))
        scale = scale if scale != 0 else 1.0
        record = ConstraintRecord(name=name, raw=float(raw), scale=scale, scaled=float(raw) / scale)
        G_scaled[i] = record.scaled
        diag_list.append(record.to_dict())

    return G_scaled, diag_list
