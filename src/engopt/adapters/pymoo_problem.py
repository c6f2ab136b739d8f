"""PyMoo adapter for the registered evaluation models.

This module wraps the evaluate_candidate interface for use with pymoo.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from pymoo.core.problem import Problem

from ..core.evaluator import evaluate_candidate
from ..core.registry import ModelSpec, get_model


class ParetoProblem(Problem):
    """PyMoo Problem wrapper for one registered model.

    Uses evaluate_candidate as the underlying evaluation function.
    """

    def __init__(
        self,
        model: str | ModelSpec,
        cfg: Any | None = None,
        **kwargs,
    ) -> None:
        """Initialize Pareto problem.

        Args:
            model: Model key or ModelSpec.
            cfg: Fixed model data (model default if None).
            **kwargs: Additional arguments passed to pymoo Problem.
        """
        spec = get_model(model)
        xl, xu = spec.checked_bounds()

        super().__init__(
            n_var=spec.n_var,
            n_obj=spec.n_obj,
            n_ieq_constr=spec.n_constr,
            xl=xl,
            xu=xu,
            **kwargs,
        )

        self.spec = spec
        self.cfg = cfg if cfg is not None else spec.default_config()
        self._n_evals = 0

    @property
    def N_OBJ(self) -> int:
        return self.spec.n_obj

    @property
    def N_CONSTR(self) -> int:
        return self.spec.n_constr

    def _evaluate(
        self,
        X: np.ndarray,
        out: dict,
        *args,
        **kwargs,
    ) -> None:
        """Evaluate population.

        Args:
            X: Decision matrix of shape (pop_size, n_var).
            out: Output dict for F and G.
        """
        n_pop = X.shape[0]
        F = np.zeros((n_pop, self.N_OBJ), dtype=np.float64)
        G = np.zeros((n_pop, self.N_CONSTR), dtype=np.float64)

        for i, x in enumerate(X):
            result = evaluate_candidate(x, self.spec, self.cfg)
            F[i] = result.F
            G[i] = result.G
            self._n_evals += 1

        out["F"] = F
        if self.N_CONSTR > 0:
            out["G"] = G

    @property
    def n_evals(self) -> int:
        """Total number of evaluations performed."""
        return self._n_evals


def create_problem(model: str, cfg: Any | None = None) -> ParetoProblem:
    """Create ParetoProblem for a model key with its default (or given) fixed data."""
    return ParetoProblem(model=model, cfg=cfg)
