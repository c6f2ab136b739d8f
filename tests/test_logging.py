"""Structured logger output and level handling."""

import io
import json

import numpy as np
import pytest

from engopt.core.logging import StructuredLogger, get_logger, set_log_level


def _lines(stream: io.StringIO) -> list[dict]:
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_records_are_json_lines():
    out = io.StringIO()
    logger = StructuredLogger("engopt.test", output=out)
    logger.info("optimization finished", n_solutions=np.int64(12), F_min=np.array([1.5, 2.0]))
    (record,) = _lines(out)
    assert record["level"] == "INFO"
    assert record["logger"] == "engopt.test"
    assert record["message"] == "optimization finished"
    assert record["n_solutions"] == 12
    assert record["F_min"] == [1.5, 2.0]


def test_level_filter():
    out = io.StringIO()
    logger = StructuredLogger("engopt.test", output=out, min_level="WARN")
    logger.debug("hidden")
    logger.info("hidden")
    logger.warn("shown")
    logger.error("shown")
    assert [r["level"] for r in _lines(out)] == ["WARN", "ERROR"]


def test_bind_adds_context_without_touching_parent():
    out = io.StringIO()
    parent = StructuredLogger("engopt.test", output=out)
    child = parent.bind(model="dual_hx_11")
    child.info("started", seed=3)
    parent.info("plain")
    first, second = _lines(out)
    assert first["model"] == "dual_hx_11"
    assert first["seed"] == 3
    assert "model" not in second


def test_timer_logs_elapsed_at_debug():
    out = io.StringIO()
    logger = StructuredLogger("engopt.test", output=out, min_level="DEBUG")
    with logger.timer("optimize", n_gen=3):
        pass
    (record,) = _lines(out)
    assert record["message"] == "optimize completed"
    assert record["elapsed_ms"] >= 0.0
    assert record["n_gen"] == 3


def test_default_target_is_stderr(capsys):
    StructuredLogger("engopt.test").error("to stderr")
    captured = capsys.readouterr()
    assert captured.out == ""
    assert json.loads(captured.err)["message"] == "to stderr"


def test_set_log_level_applies_to_existing_and_new_loggers():
    existing = get_logger("engopt.test.existing")
    try:
        set_log_level("debug")
        assert existing.enabled("DEBUG")
        assert get_logger("engopt.test.created_later").enabled("DEBUG")
    finally:
        set_log_level("ERROR")
    assert not existing.enabled("WARN")


def test_unknown_level_rejected():
    with pytest.raises(ValueError, match="Unknown log level"):
        set_log_level("verbose")
