"""Archive version guard and metadata."""

import json

import numpy as np
import pytest

from engopt.core.archive_io import ARCHIVE_VERSION, META_FILENAME, load_archive, save_archive
from engopt.core.encoding import ENCODING_VERSION
from engopt.core.registry import get_model


def _write(tmp_path, model="dual_hx_11", n=2):
    spec = get_model(model)
    X = np.ones((n, spec.n_var))
    F = np.zeros((n, spec.n_obj))
    G = np.zeros((n, spec.n_constr))
    save_archive(tmp_path, X, F, G, {"model": model, "n_pareto": n})
    return X, F, G


def test_roundtrip_metadata(tmp_path):
    X, F, G = _write(tmp_path)
    X2, F2, G2, summary = load_archive(tmp_path)
    np.testing.assert_array_equal(X, X2)
    np.testing.assert_array_equal(F, F2)
    np.testing.assert_array_equal(G, G2)

    spec = get_model("dual_hx_11")
    assert summary["archive_version"] == ARCHIVE_VERSION
    assert summary["encoding_version"] == ENCODING_VERSION
    assert summary["model_version"] == spec.version
    assert summary["var_names"] == spec.var_names
    assert summary["constraint_names"] == spec.constraint_names
    assert summary["n_pareto"] == 2


def test_linkage_archive_has_no_constraint_columns(tmp_path):
    _write(tmp_path, model="linkage")
    _, _, G, summary = load_archive(tmp_path)
    assert G.shape == (2, 0)
    assert summary["constraint_names"] == []


def test_missing_summary(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_archive(tmp_path)


def test_version_guard(tmp_path):
    _write(tmp_path)
    meta_path = tmp_path / META_FILENAME
    meta = json.loads(meta_path.read_text())
    meta["archive_version"] = "0"
    meta_path.write_text(json.dumps(meta))

    with pytest.raises(ValueError, match="Archive version mismatch"):
        load_archive(tmp_path)


def test_n_var_guard(tmp_path):
    _write(tmp_path)
    np.save(tmp_path / "pareto_X.npy", np.ones((2, 5)))
    with pytest.raises(ValueError, match="n_var mismatch"):
        load_archive(tmp_path)


@pytest.mark.parametrize("model", [None, "turbine"])
def test_model_guard(tmp_path, model):
    _write(tmp_path)
    meta_path = tmp_path / META_FILENAME
    meta = json.loads(meta_path.read_text())
    if model is None:
        del meta["model"]
    else:
        meta["model"] = model
    meta_path.write_text(json.dumps(meta))

    with pytest.raises(ValueError, match="unknown model"):
        load_archive(tmp_path)
