"""Command-line entry points.

``engopt-run-single`` and ``engopt-run-pareto`` resolve to the wrappers
below. Command modules are imported on first call so that
``python -m engopt.cli.<command>`` runs without a ``runpy`` double-import
warning and without loading pymoo for single evaluations.
"""

from __future__ import annotations

from importlib import import_module

COMMANDS = {
    "run-single": "run_single",
    "run-pareto": "run_pareto",
}


def dispatch(command: str, argv: list[str] | None = None) -> int:
    """Run ``command`` (a key of COMMANDS) and return its exit code."""
    try:
        module = COMMANDS[command]
    except KeyError:
        raise ValueError(f"Unknown command {command!r}; available: {sorted(COMMANDS)}") from None
    return import_module(f"{__name__}.{module}").main(argv)


def run_single_main(argv: list[str] | None = None) -> int:
    return dispatch("run-single", argv)


def run_pareto_main(argv: list[str] | None = None) -> int:
    return dispatch("run-pareto", argv)


__all__ = ["COMMANDS", "dispatch", "run_pareto_main", "run_single_main"]
