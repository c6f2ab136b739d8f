"""Pytest configuration for engopt.

Every registered model is exercised by the parametrized ``model_key``
fixture, so shape/sign/determinism checks automatically cover new models.
"""

from __future__ import annotations

import numpy as np
import pytest

from engopt.core.logging import set_log_level
from engopt.core.registry import list_models


@pytest.fixture(scope="session", autouse=True)
def _quiet_logs() -> None:
    # Structured logs go to stderr; keep test output readable.
    set_log_level("ERROR")


@pytest.fixture(params=list_models())
def model_key(request) -> str:
    return request.param


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)
