"""Four-bar linkage model tests.

Penalty paths (Grashof, loop closure, degenerate swing) must resolve to the
fixed penalty; a reference geometry pins the swing value.
"""

import numpy as np
import pytest

from engopt.core.constants import LINKAGE_OFFSET_DEG
from engopt.linkage.fourbar import (
    LinkageConfig,
    LinkageParams,
    bounds,
    crank_angle,
    evaluate_linkage,
    is_grashof,
    linkage_objective,
)

L1 = 215.0

# Reference swing for L1=215, L2=95, L3=260, L4=120 with the 77 degree offset
REFERENCE_SWING_DEG = 41.695421625064


def test_reference_geometry_swing():
    value = linkage_objective(L1, [95.0, 260.0, 120.0])
    assert value == pytest.approx(REFERENCE_SWING_DEG, abs=1e-6)


def test_reference_geometry_crank_angles():
    a90 = crank_angle(L1, 95.0, 260.0, 120.0, 90.0, 77.0)
    a0 = crank_angle(L1, 95.0, 260.0, 120.0, 0.0, 77.0)
    assert np.degrees(a90) == pytest.approx(209.558766316755, abs=1e-6)
    assert np.degrees(a0) == pytest.approx(251.254187941820, abs=1e-6)


def test_repeat_evaluation_is_idempotent():
    x = np.array([95.0, 260.0, 120.0])
    r1 = evaluate_linkage(x)
    r2 = evaluate_linkage(x)
    np.testing.assert_array_equal(r1.F, r2.F)
    assert r1.diag == r2.diag


@pytest.mark.parametrize(
    "lengths",
    [
        (50.0, 150.0, 200.0),
        (60.0, 160.0, 190.0),
        (95.0, 200.0, 120.0),
        (100.0, 214.9, 100.0),
    ],
)
def test_grashof_violation_returns_penalty(lengths):
    l2, l3, l4 = lengths
    assert L1 + l4 > l2 + l3
    assert linkage_objective(L1, lengths) == 1000.0


def test_grashof_violation_random_samples(rng):
    xl, xu = bounds()
    hits = 0
    for _ in range(200):
        x = rng.uniform(xl, xu)
        if not is_grashof(L1, *x):
            hits += 1
            assert linkage_objective(L1, x) == 1000.0
    assert hits > 0


def test_loop_cannot_close_returns_penalty():
    # Grashof holds (335 <= 410) but a 10-long crank cannot reach across AC ~ 333
    lengths = (10.0, 400.0, 120.0)
    assert is_grashof(L1, *lengths)
    assert crank_angle(L1, *lengths, 90.0, 77.0) is None

    result = evaluate_linkage(np.array(lengths))
    assert result.F[0] == 1000.0
    assert result.diag["metrics"]["reason"] == "no_closure"
    assert np.all(np.isfinite(result.F))


def test_degenerate_swing_returns_penalty():
    cfg = LinkageConfig(follower_angles_deg=(90.0, 90.0))
    result = evaluate_linkage(np.array([95.0, 260.0, 120.0]), cfg)
    assert result.F[0] == 1000.0
    assert result.diag["metrics"]["reason"] == "degenerate"
    assert result.diag["metrics"]["swing_deg"] == 0.0


def test_custom_penalty_value():
    cfg = LinkageConfig(penalty=5e4)
    assert linkage_objective(L1, (50.0, 150.0, 200.0), cfg) == 5e4


def test_result_shapes_and_no_constraints():
    result = evaluate_linkage(np.array([95.0, 260.0, 120.0]))
    assert result.F.shape == (1,)
    assert result.G.shape == (0,)
    assert result.is_feasible
    assert result.max_violation == 0.0
    assert result.diag["metrics"]["penalized"] is False


def test_random_candidates_never_nan(rng):
    xl, xu = bounds()
    for _ in range(200):
        value = linkage_objective(L1, rng.uniform(xl, xu))
        assert np.isfinite(value)
        assert value == 1000.0 or 5.0 <= value <= 180.0


def test_params_roundtrip():
    p = LinkageParams(l2=95.0, l3=260.0, l4=120.0)
    assert LinkageParams.from_array(p.to_array()) == p


def test_zero_crank_returns_penalty():
    # Grashof holds (335 <= 400) but the Law of Cosines has a zero denominator
    lengths = [0.0, 400.0, 120.0]
    assert is_grashof(L1, *lengths)
    assert crank_angle(L1, *lengths, 90.0) is None
    assert linkage_objective(L1, lengths) == 1000.0


def test_crank_angle_default_offset_matches_config():
    cfg = LinkageConfig()
    assert cfg.offset_deg == LINKAGE_OFFSET_DEG
    assert crank_angle(L1, 95.0, 260.0, 120.0, 90.0) == crank_angle(
        L1, 95.0, 260.0, 120.0, 90.0, cfg.offset_deg
    )
