"""Configuration loading, merging and conversion to model data."""

import pytest
from pydantic import ValidationError

from engopt.core.config import (
    EngoptConfig,
    default_config,
    load_config,
    merge_config,
    save_config,
)
from engopt.hx.coolant_air import CoolantAirHXConfig
from engopt.hx.dual_side import DualSideHXConfig
from engopt.hx.single import SingleHXConfig
from engopt.linkage.fourbar import LinkageConfig


def test_defaults_match_model_defaults():
    cfg = default_config()
    assert cfg.fixed_data("linkage") == LinkageConfig()
    assert cfg.fixed_data("single_hx") == SingleHXConfig()
    assert cfg.fixed_data("dual_hx_18") == DualSideHXConfig()
    assert cfg.fixed_data("dual_hx_11") == CoolantAirHXConfig()


def test_fixed_data_unknown_section():
    cfg = default_config()
    with pytest.raises(KeyError):
        cfg.fixed_data("optimization")
    with pytest.raises(KeyError):
        cfg.fixed_data("turbine")


def test_yaml_roundtrip(tmp_path):
    cfg = merge_config(default_config(), {"dual_hx_18": {"weight_limit": 12.5}})
    path = tmp_path / "nested" / "engopt.yml"
    save_config(cfg, path)
    loaded = load_config(path)
    assert loaded == cfg
    assert loaded.fixed_data("dual_hx_18").weight_limit == 12.5


def test_partial_yaml_keeps_defaults(tmp_path):
    path = tmp_path / "engopt.yml"
    path.write_text("linkage:\n  l1: 200.0\noptimization:\n  n_gen: 5\n")
    cfg = load_config(path)
    assert cfg.linkage.l1 == 200.0
    assert cfg.linkage.offset_deg == 77.0
    assert cfg.optimization.n_gen == 5
    assert cfg.optimization.pop_size == 64


def test_empty_yaml(tmp_path):
    path = tmp_path / "empty.yml"
    path.write_text("")
    assert load_config(path) == EngoptConfig()


def test_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "absent.yml")


def test_merge_is_deep():
    cfg = merge_config(default_config(), {"single_hx": {"n_rows": 4}})
    assert cfg.single_hx.n_rows == 4
    assert cfg.single_hx.width == 0.3
    assert cfg.fixed_data("single_hx").n_rows == 4


def test_validation_rejects_bad_values():
    with pytest.raises(ValidationError):
        merge_config(default_config(), {"optimization": {"algorithm": "cmaes"}})
    with pytest.raises(ValidationError):
        merge_config(default_config(), {"single_hx": {"pump_efficiency": 1.5}})
