"""Candidate evaluation: THE canonical interface.

This is the ONLY interface between the evaluation models and optimizers.
No optimizer-specific code should exist in model modules.

Interface:
    evaluate_candidate(x, model, cfg) -> EvalResult(F, G, diag)

Flow:
    1. get_model(model) -> ModelSpec
    2. check_design_vector(x, n_var) (raises InvalidInputError)
    3. spec.evaluate(x, cfg) -> EvalResult
    4. Attach model/version/timing diagnostics
"""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any

import numpy as np

from .encoding import check_design_vector
from .registry import ModelSpec, get_model
from .types import EvalResult


def evaluate_candidate(
    x: np.ndarray | Sequence[float],
    model: str | ModelSpec,
    cfg: Any | None = None,
) -> EvalResult:
    """Evaluate candidate solution.

    THE canonical interface between the models and optimizers.

    Args:
        x: Flat decision vector (length spec.n_var).
        model: Model key (``linkage``, ``single_hx``, ``dual_hx_18``,
            ``dual_hx_11``) or a ModelSpec.
        cfg: Fixed model data; the model's default configuration if None.

    Returns:
        EvalResult with:
            F: Objectives (minimize)
            G: Constraints (G <= 0 feasible)
            diag: Diagnostics dict
    """
    t0 = time.perf_counter()

    spec = get_model(model)
    x_arr = check_design_vector(x, spec.n_var)
    if cfg is None:
        cfg = spec.default_config()

    result = spec.evaluate(x_arr, cfg)

    result.diag["model"] = spec.name
    result.diag["versions"] = {spec.name: spec.version}
    result.diag["timings"] = {"total_ms": (time.perf_counter() - t0) * 1000}

    return result


def evaluate_candidate_batch(
    X: np.ndarray | Sequence[np.ndarray],
    model: str | ModelSpec,
    cfg: Any | None = None,
) -> tuple[np.ndarray, np.ndarray, list[dict]]:
    """Evaluate a batch of candidates.

    Args:
        X: Array-like of shape (n, n_var) or iterable of 1-D arrays.
        model: Model key or ModelSpec.
        cfg: Shared fixed model data.

    Returns:
        F_all: (n, n_obj) objective array
        G_all: (n, n_constr) constraint array
        diags: list of diagnostics dicts
    """
    spec = get_model(model)
    if cfg is None:
        cfg = spec.default_config()
    X_arr = np.atleast_2d(np.asarray(list(X)) if not isinstance(X, np.ndarray) else X)
    results = [evaluate_candidate(x, spec, cfg) for x in X_arr]
    F_all = np.stack([r.F for r in results], axis=0)
    G_all = np.stack([r.G for r in results], axis=0)
    diags = [r.diag for r in results]
    return F_all, G_all, diags
