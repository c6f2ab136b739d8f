"""Four-bar linkage crank-angle model.

The ground link L1 joins the follower pivot O4 (origin) and the crank pivot
O2 at (L1, 0). For each follower angle the follower tip B is placed at
angle (theta + offset) on a circle of radius L4 about O4. The crank angle that
closes the loop through the coupler L3 follows from the Law of Cosines in
triangle O2-A-B plus the polar angle of B seen from O2.

The objective is the crank swing between the two follower positions. Every
infeasible configuration resolves to a fixed penalty; nothing in this module
raises.

Layout:
    x[0] - L2 crank length
    x[1] - L3 coupler length
    x[2] - L4 follower length
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..core.constants import LINKAGE_MIN_ANGLE_DIFF_DEG, LINKAGE_OFFSET_DEG, LINKAGE_PENALTY
from ..core.types import EvalResult

N_VAR = 3
VAR_NAMES = ["l2", "l3", "l4"]
OBJECTIVE_NAMES = ["crank_swing_deg"]


@dataclass(frozen=True)
class LinkageConfig:
    """Fixed linkage data.

    Attributes:
        l1: Ground link length (same unit as the design lengths).
        offset_deg: Fixed angular offset of the follower pivot (degrees).
        follower_angles_deg: The two follower positions compared (degrees).
        penalty: Objective value assigned to infeasible configurations.
        min_angle_diff_deg: Swings below this are treated as degenerate.
    """

    l1: float = 215.0
    offset_deg: float = LINKAGE_OFFSET_DEG
    follower_angles_deg: tuple[float, float] = (90.0, 0.0)
    penalty: float = LINKAGE_PENALTY
    min_angle_diff_deg: float = LINKAGE_MIN_ANGLE_DIFF_DEG


@dataclass(frozen=True)
class LinkageParams:
    """Moving link lengths."""

    l2: float
    l3: float
    l4: float

    def to_array(self) -> np.ndarray:
        """Convert to flat array."""
        return np.array([self.l2, self.l3, self.l4], dtype=np.float64)

    @classmethod
    def from_array(cls, arr: Sequence[float] | np.ndarray) -> LinkageParams:
        """Create from flat array."""
        return cls(l2=float(arr[0]), l3=float(arr[1]), l4=float(arr[2]))


def bounds() -> tuple[np.ndarray, np.ndarray]:
    """Return (xl, xu) for [L2, L3, L4]."""
    xl = np.array([50.0, 150.0, 50.0])
    xu = np.array([150.0, 350.0, 200.0])
    return xl, xu


def is_grashof(l1: float, l2: float, l3: float, l4: float) -> bool:
    """Feasibility test used by this mechanism: L1 + L4 <= L2 + L3."""
    return l1 + l4 <= l2 + l3


def crank_angle(
    l1: float,
    l2: float,
    l3: float,
    l4: float,
    follower_deg: float,
    offset_deg: float = LINKAGE_OFFSET_DEG,
) -> float | None:
    """Crank angle (radians) that places the follower at ``follower_deg``.

    Returns:
        The crank angle, or None when the loop cannot close (zero crank or
        ground diagonal, or a Law of Cosines argument outside [-1, 1]).
    """
    phi = np.radians(follower_deg + offset_deg)
    bx = l4 * np.cos(phi) - l1
    by = l4 * np.sin(phi)
    ac = float(np.hypot(bx, by))
    if ac == 0.0 or l2 == 0.0:
        return None

    cos_alpha = (l2**2 + ac**2 - l3**2) / (2.0 * l2 * ac)
    if not -1.0 <= cos_alpha <= 1.0:
        return None

    return float(np.arccos(cos_alpha) + np.arctan2(by, bx))


def _swing(l1: float, params: LinkageParams, cfg: LinkageConfig) -> tuple[float, dict]:
    l2, l3, l4 = params.l2, params.l3, params.l4
    diag: dict = {"grashof": is_grashof(l1, l2, l3, l4), "crank_angles_deg": None}

    if not diag["grashof"]:
        return cfg.penalty, {**diag, "reason": "grashof"}

    angles = [crank_angle(l1, l2, l3, l4, th, cfg.offset_deg) for th in cfg.follower_angles_deg]
    if any(a is None for a in angles):
        return cfg.penalty, {**diag, "reason": "no_closure"}

    diag["crank_angles_deg"] = [float(np.degrees(a)) for a in angles]
    swing = abs(float(np.degrees(angles[0] - angles[1]))) % 360.0
    swing = min(swing, 360.0 - swing)
    diag["swing_deg"] = swing

    if swing < cfg.min_angle_diff_deg:
        return cfg.penalty, {**diag, "reason": "degenerate"}

    return swing, {**diag, "reason": None}


def linkage_objective(
    l1: float,
    lengths: Sequence[float] | np.ndarray,
    cfg: LinkageConfig | None = None,
) -> float:
    """Crank swing in degrees for [L2, L3, L4], or the penalty value."""
    cfg = cfg or LinkageConfig()
    value, _ = _swing(l1, LinkageParams.from_array(lengths), cfg)
    return value


def evaluate_linkage(x: np.ndarray, cfg: LinkageConfig | None = None) -> EvalResult:
    """Evaluate a linkage candidate.

    Args:
        x: [L2, L3, L4].
        cfg: Fixed linkage data (defaults to L1 = 215, 77 degree offset).

    Returns:
        EvalResult with F = [swing or penalty] and an empty G.
    """
    cfg = cfg or LinkageConfig()
    value, diag = _swing(cfg.l1, LinkageParams.from_array(x), cfg)
    diag["penalized"] = diag["reason"] is not None
    return EvalResult(
        F=np.array([value], dtype=np.float64),
        G=np.zeros(0, dtype=np.float64),
        diag={"metrics": diag, "constraints": []},
    )
