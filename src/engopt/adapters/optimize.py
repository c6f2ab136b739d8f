"""Black-box optimizer boundary.

The evaluation models never depend on a search algorithm. Anything that can
call a function repeatedly with candidate vectors can drive them; this module
provides the generic entry point

    optimize(evaluate_fn, bounds, constraint_fn, config) -> ParetoSet

backed by pymoo (GA for one objective, NSGA-II / NSGA-III for several).
"""

from __future__ import annotations

import time
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

import numpy as np
from pymoo.core.problem import ElementwiseProblem

from ..core.config import OptimizationConfig
from ..core.encoding import check_bounds
from ..core.logging import get_logger
from .pymoo_problem import ParetoProblem

logger = get_logger(__name__)

EvaluateFn = Callable[[np.ndarray], "float | np.ndarray"]
ConstraintFn = Callable[[np.ndarray], np.ndarray]


@dataclass
class ParetoSet:
    """Non-dominated designs returned by an optimizer.

    Attributes:
        X: Decision vectors, shape (n, n_var).
        F: Objective values, shape (n, n_obj).
        G: Constraint values, shape (n, n_constr).
        n_evals: Number of function evaluations spent.
        elapsed_s: Wall time of the search.
    """

    X: np.ndarray
    F: np.ndarray
    G: np.ndarray
    n_evals: int = 0
    elapsed_s: float = 0.0

    @property
    def n_solutions(self) -> int:
        return int(self.X.shape[0])

    @property
    def feasible_mask(self) -> np.ndarray:
        if self.G.shape[1] == 0:
            return np.ones(self.n_solutions, dtype=bool)
        return np.all(self.G <= 0, axis=1)

    def best(self, objective: int = 0) -> tuple[np.ndarray, np.ndarray]:
        """Design and objectives minimizing one objective column."""
        if self.n_solutions == 0:
            raise ValueError("Pareto set is empty")
        i = int(np.argmin(self.F[:, objective]))
        return self.X[i], self.F[i]


class FunctionProblem(ElementwiseProblem):
    """Elementwise pymoo problem around plain callables."""

    def __init__(
        self,
        evaluate_fn: EvaluateFn,
        xl: np.ndarray,
        xu: np.ndarray,
        n_obj: int,
        constraint_fn: ConstraintFn | None = None,
        n_constr: int = 0,
    ) -> None:
        super().__init__(n_var=len(xl), n_obj=n_obj, n_ieq_constr=n_constr, xl=xl, xu=xu)
        self.evaluate_fn = evaluate_fn
        self.constraint_fn = constraint_fn
        self.n_evals = 0

    def _evaluate(self, x, out, *args, **kwargs):
        out["F"] = np.atleast_1d(np.asarray(self.evaluate_fn(x), dtype=np.float64))
        if self.constraint_fn is not None:
            out["G"] = np.atleast_1d(np.asarray(self.constraint_fn(x), dtype=np.float64))
        self.n_evals += 1


def make_algorithm(n_obj: int, config: OptimizationConfig):
    """Pick a pymoo algorithm for the objective count and settings."""
    name = config.algorithm
    if name == "auto":
        name = "ga" if n_obj == 1 else "nsga2"

    if name == "ga":
        from pymoo.algorithms.soo.nonconvex.ga import GA

        return GA(pop_size=config.pop_size)
    if name == "nsga2":
        from pymoo.algorithms.moo.nsga2 import NSGA2

        return NSGA2(pop_size=config.pop_size)

    from pymoo.algorithms.moo.nsga3 import NSGA3
    from pymoo.util.ref_dirs import get_reference_directions

    ref_dirs = get_reference_directions("das-dennis", n_obj, n_partitions=config.n_partitions)
    pop_size = max(config.pop_size, len(ref_dirs))
    if pop_size != config.pop_size:
        logger.warn("population raised to reference-direction count", pop_size=pop_size)
    return NSGA3(pop_size=pop_size, ref_dirs=ref_dirs)


def _run(problem, config: OptimizationConfig) -> tuple[np.ndarray, np.ndarray, np.ndarray, float]:
    from pymoo.optimize import minimize
    from pymoo.termination import get_termination

    algorithm = make_algorithm(problem.n_obj, config)
    logger.info(
        "optimization started",
        algorithm=type(algorithm).__name__,
        pop_size=config.pop_size,
        n_gen=config.n_gen,
        n_var=problem.n_var,
        n_obj=problem.n_obj,
    )

    t0 = time.perf_counter()
    result = minimize(
        problem,
        algorithm,
        get_termination("n_gen", config.n_gen),
        seed=config.seed,
        verbose=False,
    )
    elapsed = time.perf_counter() - t0

    n_constr = problem.n_ieq_constr
    if result.X is None:
        X = np.zeros((0, problem.n_var))
        F = np.zeros((0, problem.n_obj))
        G = np.zeros((0, n_constr))
    else:
        X = np.atleast_2d(result.X).reshape(-1, problem.n_var)
        F = np.atleast_2d(result.F).reshape(-1, problem.n_obj)
        G_res = getattr(result, "G", None)
        if n_constr > 0 and G_res is not None:
            G = np.atleast_2d(G_res).reshape(-1, n_constr)
        else:
            G = np.zeros((X.shape[0], n_constr))

    logger.info("optimization finished", n_solutions=int(X.shape[0]), elapsed_s=elapsed)
    return X, F, G, elapsed


def optimize(
    evaluate_fn: EvaluateFn,
    bounds: tuple[np.ndarray, np.ndarray],
    constraint_fn: ConstraintFn | None = None,
    config: OptimizationConfig | None = None,
) -> ParetoSet:
    """Minimize ``evaluate_fn`` over a box with optional ``constraint_fn`` (G <= 0 feasible).

    Objective and constraint counts are probed once at the box midpoint.
    """
    config = config or OptimizationConfig()
    xl = np.asarray(bounds[0], dtype=np.float64)
    xu = np.asarray(bounds[1], dtype=np.float64)
    check_bounds(xl, xu)

    x_mid = (xl + xu) / 2
    n_obj = len(np.atleast_1d(evaluate_fn(x_mid)))
    n_constr = len(np.atleast_1d(constraint_fn(x_mid))) if constraint_fn is not None else 0

    problem = FunctionProblem(evaluate_fn, xl, xu, n_obj, constraint_fn, n_constr)
    X, F, G, elapsed = _run(problem, config)
    return ParetoSet(X=X, F=F, G=G, n_evals=problem.n_evals, elapsed_s=elapsed)


def optimize_model(
    model: str,
    cfg: Any | None = None,
    config: OptimizationConfig | None = None,
) -> tuple[ParetoSet, ParetoProblem]:
    """Run the configured optimizer on a registered model."""
    config = config or OptimizationConfig()
    problem = ParetoProblem(model=model, cfg=cfg)
    X, F, G, elapsed = _run(problem, config)
    return ParetoSet(X=X, F=F, G=G, n_evals=problem.n_evals, elapsed_s=elapsed), problem
