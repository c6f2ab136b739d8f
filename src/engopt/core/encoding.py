"""Design-vector validation and sampling helpers.

The evaluation models never check their inputs; these helpers are applied
once at the boundary (evaluator, CLI, optimizer adapter) instead.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

ENCODING_VERSION = "1.0"


class InvalidInputError(ValueError):
    """Malformed design vector or inadmissible bounds."""


def check_design_vector(x: Sequence[float] | np.ndarray, n_var: int) -> np.ndarray:
    """Coerce ``x`` to a float64 vector of length ``n_var``.

    Raises:
        InvalidInputError: wrong length, wrong rank or non-finite entries.
    """
    arr = np.asarray(x, dtype=np.float64)
    if arr.ndim != 1:
        raise InvalidInputError(f"Expected a 1-D design vector, got shape {arr.shape}")
    if len(arr) != n_var:
        raise InvalidInputError(f"Expected {n_var} variables, got {len(arr)}")
    if not np.all(np.isfinite(arr)):
        raise InvalidInputError(f"Design vector contains non-finite values: {arr.tolist()}")
    return arr


def check_bounds(
    xl: np.ndarray,
    xu: np.ndarray,
    positive: Sequence[int] | None = None,
) -> None:
    """Validate a bound pair.

    Args:
        xl: Lower bounds.
        xu: Upper bounds.
        positive: Indices whose lower bound must be strictly positive
            (variables that end up in a denominator).

    Raises:
        InvalidInputError: shape mismatch, inverted bounds, or a zero/negative
            lower bound on a positivity-required variable.
    """
    xl = np.asarray(xl, dtype=np.float64)
    xu = np.asarray(xu, dtype=np.float64)
    if xl.shape != xu.shape:
        raise InvalidInputError(f"Bound shape mismatch: {xl.shape} vs {xu.shape}")
    inverted = np.flatnonzero(xl > xu)
    if len(inverted):
        raise InvalidInputError(f"Lower bound exceeds upper bound at indices {inverted.tolist()}")
    if positive is not None:
        bad = [i for i in positive if xl[i] <= 0.0]
        if bad:
            raise InvalidInputError(f"Bounds must be strictly positive at indices {bad}")


def random_candidate(
    xl: np.ndarray,
    xu: np.ndarray,
    rng: np.random.Generator | None = None,
) -> np.ndarray:
    """Generate a random candidate within bounds.

    Args:
        xl: Lower bounds.
        xu: Upper bounds.
        rng: Random number generator (uses default if None).

    Returns:
        Random decision vector within bounds.
    """
    if rng is None:
        rng = np.random.default_rng()
    return rng.uniform(xl, xu)


def mid_bounds_candidate(xl: np.ndarray, xu: np.ndarray) -> np.ndarray:
    """Return candidate at midpoint of bounds."""
    return (np.asarray(xl, dtype=np.float64) + np.asarray(xu, dtype=np.float64)) / 2
