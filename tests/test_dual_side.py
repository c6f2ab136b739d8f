"""Dual-side heat exchanger tests (18-variable and 11-variable layouts)."""

from dataclasses import replace

import numpy as np
import pytest

from engopt.core.constants import AIR, COOLANT
from engopt.hx.coolant_air import (
    CoolantAirHXConfig,
    CoolantAirHXParams,
    evaluate_channels,
    evaluate_coolant_air_hx,
)
from engopt.hx.coolant_air import bounds as bounds_11
from engopt.hx.dual_side import (
    DualSideHXConfig,
    DualSideHXParams,
    SideGeometry,
    evaluate_dual_side_hx,
    evaluate_side,
)
from engopt.hx.dual_side import bounds as bounds_18


def _mid(bounds_fn):
    xl, xu = bounds_fn()
    return (xl + xu) / 2


# ---------------------------------------------------------------------------
# 18-variable counterflow model
# ---------------------------------------------------------------------------


def test_dual18_shapes_and_determinism():
    x = _mid(bounds_18)
    r1 = evaluate_dual_side_hx(x)
    r2 = evaluate_dual_side_hx(x)
    assert r1.F.shape == (3,)
    assert r1.G.shape == (3,)
    np.testing.assert_array_equal(r1.F, r2.F)
    np.testing.assert_array_equal(r1.G, r2.G)
    assert np.all(np.isfinite(r1.F))


def test_dual18_constraints_match_metrics():
    cfg = DualSideHXConfig()
    result = evaluate_dual_side_hx(_mid(bounds_18), cfg=cfg)
    m = result.diag["metrics"]
    np.testing.assert_allclose(
        result.G,
        [
            m["weight"] - cfg.weight_limit,
            m["pressure_drop"] - cfg.pressure_drop_limit,
            m["heat_transfer"] - cfg.total_heat_load,
        ],
    )
    assert result.F[1] == pytest.approx(-m["heat_transfer"])


def test_dual18_heat_load_argument_overrides_config():
    x = _mid(bounds_18)
    result = evaluate_dual_side_hx(x, total_heat_load=1.0)
    q = result.diag["metrics"]["heat_transfer"]
    assert result.G[2] == pytest.approx(q - 1.0)
    assert result.diag["metrics"]["total_heat_load"] == 1.0


def test_dual18_normalization_divides_objectives():
    x = _mid(bounds_18)
    base = evaluate_dual_side_hx(x)
    scaled = evaluate_dual_side_hx(x, cfg=DualSideHXConfig(weight_norm=2.0, pressure_norm=10.0))
    assert scaled.F[0] == pytest.approx(base.F[0] / 2.0)
    assert scaled.F[1] == pytest.approx(base.F[1])
    assert scaled.F[2] == pytest.approx(base.F[2] / 10.0)
    np.testing.assert_allclose(scaled.G, base.G)


def test_dual18_heat_transfer_bounded_by_inlet_spread():
    cfg = DualSideHXConfig()
    m = evaluate_dual_side_hx(_mid(bounds_18), cfg=cfg).diag["metrics"]
    assert 0.0 < m["effectiveness"] <= 1.0
    assert 0.0 < m["C_r"] <= 1.0
    assert m["heat_transfer"] <= m["c_min"] * (cfg.t_hot_in - cfg.t_cold_in) + 1e-9


def test_dual18_balanced_streams_use_limit():
    # Identical sides with identical fluids give C_r = 1 exactly
    side = _mid(bounds_18)[:9]
    x = np.concatenate([side, side])
    cfg = DualSideHXConfig(hot_fluid=AIR, cold_fluid=AIR)
    m = evaluate_dual_side_hx(x, cfg=cfg).diag["metrics"]
    assert m["C_r"] == pytest.approx(1.0)
    assert m["effectiveness"] == pytest.approx(m["NTU"] / (1.0 + m["NTU"]))


@pytest.mark.parametrize(
    ("part", "fluid", "v_slow", "v_fast"),
    [(slice(0, 9), COOLANT, 0.1, 0.9), (slice(9, 18), AIR, 2.0, 8.0)],
    ids=["hot", "cold"],
)
def test_side_heat_conductance_grows_with_velocity(part, fluid, v_slow, v_fast):
    side = SideGeometry.from_array(_mid(bounds_18)[part])
    slow = evaluate_side(replace(side, velocity=v_slow), fluid)
    fast = evaluate_side(replace(side, velocity=v_fast), fluid)
    assert fast.reynolds > slow.reynolds
    assert fast.h > slow.h
    assert fast.pressure_drop > slow.pressure_drop
    assert fast.mass_flow == pytest.approx(v_fast / v_slow * slow.mass_flow)


def test_side_weight_grows_with_layers():
    x = _mid(bounds_18)
    x_more = x.copy()
    x_more[7] *= 2.0
    assert evaluate_dual_side_hx(x_more).F[0] > evaluate_dual_side_hx(x).F[0]


def test_dual18_random_candidates_finite(rng):
    xl, xu = bounds_18()
    for _ in range(50):
        result = evaluate_dual_side_hx(rng.uniform(xl, xu))
        assert np.all(np.isfinite(result.F))
        assert np.all(np.isfinite(result.G))


def test_dual18_params_split():
    x = _mid(bounds_18)
    p = DualSideHXParams.from_array(x)
    np.testing.assert_array_equal(p.hot.to_array(), x[:9])
    np.testing.assert_array_equal(p.cold.to_array(), x[9:])


# ---------------------------------------------------------------------------
# 11-variable coolant/air model
# ---------------------------------------------------------------------------


def test_dual11_shapes():
    result = evaluate_coolant_air_hx(_mid(bounds_11))
    assert result.F.shape == (3,)
    assert result.G.shape == (3,)
    assert np.all(np.isfinite(result.F))


def test_dual11_duty_is_conductance_times_load():
    result = evaluate_coolant_air_hx(_mid(bounds_11))
    m = result.diag["metrics"]
    assert m["heat_transfer"] == pytest.approx(m["UA"] * 5000.0)
    assert result.F[1] == pytest.approx(-m["UA"] * 5000.0)

    doubled = evaluate_coolant_air_hx(_mid(bounds_11), total_heat_load=10000.0)
    assert doubled.F[1] == pytest.approx(2.0 * result.F[1])


def test_dual11_constraint_values():
    x = _mid(bounds_11)
    p = CoolantAirHXParams.from_array(x)
    result = evaluate_coolant_air_hx(x)
    np.testing.assert_allclose(
        result.G,
        [p.n_layers - 30.0, p.air_flow_rate - 1.2, p.coolant_flow_rate - 0.6],
    )


def test_dual11_flow_limit_violation():
    x = _mid(bounds_11)
    x[9] = 1.5
    result = evaluate_coolant_air_hx(x)
    assert result.G[1] == pytest.approx(0.3)
    assert not result.is_feasible


def test_dual11_custom_limits():
    x = _mid(bounds_11)
    cfg = CoolantAirHXConfig(max_layers=10.0)
    assert evaluate_coolant_air_hx(x, cfg=cfg).G[0] == pytest.approx(x[10] - 10.0)


@pytest.mark.parametrize(
    ("height", "width", "n_channels", "fluid", "m_low"),
    [(0.003, 0.01, 20.0, COOLANT, 0.1), (0.0095, 0.0025, 110.0, AIR, 0.2)],
    ids=["coolant", "air"],
)
def test_channel_coefficient_grows_with_flow(height, width, n_channels, fluid, m_low):
    low = evaluate_channels(height, width, n_channels, 10.0, m_low, 0.4, fluid)
    high = evaluate_channels(height, width, n_channels, 10.0, 5.0 * m_low, 0.4, fluid)
    assert high.reynolds > low.reynolds
    assert high.velocity == pytest.approx(5.0 * low.velocity)
    assert high.h > low.h
    assert high.pressure_drop == pytest.approx(25.0 * low.pressure_drop)


def test_dual11_var_names_follow_layout():
    from engopt.hx.coolant_air import VAR_NAMES

    assert len(VAR_NAMES) == 11
    assert VAR_NAMES[0] == "coolant_channel_height"
    assert VAR_NAMES[-1] == "n_layers"
