"""Pareto archive IO with version guards."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

import numpy as np

from .constraints import get_constraint_scales
from .encoding import ENCODING_VERSION
from .registry import UnknownModelError, get_model

META_FILENAME = "summary.json"
ARCHIVE_VERSION = "1"


def save_archive(
    outdir: Path,
    X: np.ndarray,
    F: np.ndarray,
    G: np.ndarray,
    summary: Dict[str, Any],
) -> None:
    """Save archive arrays plus metadata.

    ``summary`` must name the model under the ``"model"`` key.
    """
    spec = get_model(summary["model"])
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    np.save(outdir / "pareto_X.npy", X)
    np.save(outdir / "pareto_F.npy", F)
    np.save(outdir / "pareto_G.npy", G)

    summary = {
        **summary,
        "archive_version": ARCHIVE_VERSION,
        "encoding_version": ENCODING_VERSION,
        "model_version": spec.version,
        "var_names": spec.var_names,
        "objective_names": spec.objective_names,
        "constraint_names": spec.constraint_names,
        "constraint_scales": get_constraint_scales(),
        "n_var": spec.n_var,
    }
    with open(outdir / META_FILENAME, "w") as f:
        json.dump(summary, f, indent=2)


def load_archive(outdir: Path) -> tuple[np.ndarray, np.ndarray, np.ndarray, dict]:
    """Load archive with version validation. Raises on incompatible archives."""
    outdir = Path(outdir)
    summary_path = outdir / META_FILENAME
    if not summary_path.exists():
        raise FileNotFoundError(f"Missing {META_FILENAME} in {outdir}")

    with open(summary_path) as f:
        summary = json.load(f)

    version = summary.get("archive_version")
    if version != ARCHIVE_VERSION:
        raise ValueError(f"Archive version mismatch: archive {version}, expected {ARCHIVE_VERSION}")

    X = np.load(outdir / "pareto_X.npy", allow_pickle=False)
    F = np.load(outdir / "pareto_F.npy", allow_pickle=False)
    G = np.load(outdir / "pareto_G.npy", allow_pickle=False)

    try:
        n_var = get_model(summary.get("model")).n_var
    except UnknownModelError:
        raise ValueError(f"Archive names unknown model {summary.get('model')!r}") from None
    if X.ndim != 2 or X.shape[1] != summary.get("n_var", n_var) or X.shape[1] != n_var:
        raise ValueError(f"n_var mismatch: {X.shape} vs {summary.get('n_var')}")

    return X, F, G, summary
