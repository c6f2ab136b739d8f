"""Model registry.

Centralizes knowledge of which evaluation models exist, their vector
layouts, bounds and default fixed data. Model modules are imported lazily so
that ``engopt.core`` stays importable from inside the model packages.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import numpy as np

from .encoding import check_bounds, mid_bounds_candidate, random_candidate
from .types import EvalResult


class UnknownModelError(KeyError):
    """Requested model key is not registered."""


@dataclass(frozen=True)
class ModelSpec:
    """Public contract of one evaluation model."""

    name: str
    n_var: int
    n_obj: int
    n_constr: int
    var_names: list[str]
    objective_names: list[str]
    constraint_names: list[str]
    bounds: Callable[[], tuple[np.ndarray, np.ndarray]]
    evaluate: Callable[[np.ndarray, Any], EvalResult]
    default_config: Callable[[], Any]
    version: str
    positive: tuple[int, ...] = field(default=())

    def checked_bounds(self) -> tuple[np.ndarray, np.ndarray]:
        """Bounds after admissibility checks."""
        xl, xu = self.bounds()
        check_bounds(xl, xu, positive=self.positive)
        return xl, xu

    def random_candidate(self, rng: np.random.Generator | None = None) -> np.ndarray:
        xl, xu = self.bounds()
        return random_candidate(xl, xu, rng)

    def mid_bounds_candidate(self) -> np.ndarray:
        xl, xu = self.bounds()
        return mid_bounds_candidate(xl, xu)


_REGISTRY: dict[str, ModelSpec] = {}


def _build_registry() -> dict[str, ModelSpec]:
    from ..hx import coolant_air, dual_side, single
    from ..linkage import fourbar
    from .constants import (
        MODEL_VERSION_DUAL_HX_11,
        MODEL_VERSION_DUAL_HX_18,
        MODEL_VERSION_LINKAGE,
        MODEL_VERSION_SINGLE_HX,
    )
    from .constraints import get_constraint_names

    def _dual_18(x: np.ndarray, cfg: dual_side.DualSideHXConfig) -> EvalResult:
        return dual_side.evaluate_dual_side_hx(x, cfg=cfg)

    def _dual_11(x: np.ndarray, cfg: coolant_air.CoolantAirHXConfig) -> EvalResult:
        return coolant_air.evaluate_coolant_air_hx(x, cfg=cfg)

    specs = [
        ModelSpec(
            name="linkage",
            n_var=fourbar.N_VAR,
            n_obj=1,
            n_constr=0,
            var_names=list(fourbar.VAR_NAMES),
            objective_names=list(fourbar.OBJECTIVE_NAMES),
            constraint_names=get_constraint_names("linkage"),
            bounds=fourbar.bounds,
            evaluate=fourbar.evaluate_linkage,
            default_config=fourbar.LinkageConfig,
            version=MODEL_VERSION_LINKAGE,
            positive=(0, 1, 2),
        ),
        ModelSpec(
            name="single_hx",
            n_var=single.N_VAR,
            n_obj=3,
            n_constr=1,
            var_names=list(single.VAR_NAMES),
            objective_names=list(single.OBJECTIVE_NAMES),
            constraint_names=get_constraint_names("single_hx"),
            bounds=single.bounds,
            evaluate=single.evaluate_single_hx,
            default_config=single.SingleHXConfig,
            version=MODEL_VERSION_SINGLE_HX,
            positive=(0, 1, 2),
        ),
        ModelSpec(
            name="dual_hx_18",
            n_var=dual_side.N_VAR,
            n_obj=3,
            n_constr=3,
            var_names=list(dual_side.VAR_NAMES),
            objective_names=list(dual_side.OBJECTIVE_NAMES),
            constraint_names=get_constraint_names("dual_hx_18"),
            bounds=dual_side.bounds,
            evaluate=_dual_18,
            default_config=dual_side.DualSideHXConfig,
            version=MODEL_VERSION_DUAL_HX_18,
            positive=tuple(range(dual_side.N_VAR)),
        ),
        ModelSpec(
            name="dual_hx_11",
            n_var=coolant_air.N_VAR,
            n_obj=3,
            n_constr=3,
            var_names=list(coolant_air.VAR_NAMES),
            objective_names=list(coolant_air.OBJECTIVE_NAMES),
            constraint_names=get_constraint_names("dual_hx_11"),
            bounds=coolant_air.bounds,
            evaluate=_dual_11,
            default_config=coolant_air.CoolantAirHXConfig,
            version=MODEL_VERSION_DUAL_HX_11,
            positive=tuple(range(coolant_air.N_VAR)),
        ),
    ]
    return {s.name: s for s in specs}


def get_model(name: str | ModelSpec) -> ModelSpec:
    """Look up a model by key (a ModelSpec is passed through)."""
    if isinstance(name, ModelSpec):
        return name
    if not _REGISTRY:
        _REGISTRY.update(_build_registry())
    try:
        return _REGISTRY[name]
    except KeyError:
        raise UnknownModelError(f"Unknown model {name!r}; available: {sorted(_REGISTRY)}") from None


def list_models() -> list[str]:
    """List registered model keys."""
    if not _REGISTRY:
        _REGISTRY.update(_build_registry())
    return sorted(_REGISTRY)
