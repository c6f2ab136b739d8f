"""JSON-lines logging for the CLIs, the optimizer adapter and config loading.

Records go to stderr (stdout carries the CLI's JSON results). Model
evaluations never log.

Usage:
    logger = get_logger(__name__).bind(model="dual_hx_18")
    logger.info("optimization started", pop_size=64)
    with logger.timer("optimize"):
        ...
"""

from __future__ import annotations

import json
import sys
import time
from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Any, TextIO

import numpy as np

LEVELS = {"DEBUG": 0, "INFO": 1, "WARN": 2, "ERROR": 3}


def _level_value(level: str) -> int:
    try:
        return LEVELS[level.upper()]
    except KeyError:
        raise ValueError(f"Unknown log level {level!r}; expected one of {list(LEVELS)}") from None


def _jsonable(value: Any) -> Any:
    # numpy scalars and arrays show up in optimizer and archive fields
    if isinstance(value, np.generic):
        return value.item()
    if isinstance(value, np.ndarray):
        return value.tolist()
    return str(value)


@dataclass
class LogRecord:
    """One emitted line."""

    level: str
    message: str
    logger: str
    timestamp: float = field(default_factory=time.time)
    fields: dict[str, Any] = field(default_factory=dict)

    def to_json(self) -> str:
        payload = {
            "timestamp": self.timestamp,
            "level": self.level,
            "logger": self.logger,
            "message": self.message,
            **self.fields,
        }
        return json.dumps(payload, default=_jsonable)


class StructuredLogger:
    """Level-filtered JSON logger with optional bound context fields."""

    def __init__(
        self,
        name: str,
        output: TextIO | None = None,
        min_level: str = "INFO",
        context: dict[str, Any] | None = None,
    ) -> None:
        self.name = name
        self.output = output
        self.context = dict(context or {})
        self.min_level = _level_value(min_level)

    def bind(self, **context: Any) -> StructuredLogger:
        """Child logger that adds ``context`` to every record."""
        child = StructuredLogger(self.name, self.output, context={**self.context, **context})
        child.min_level = self.min_level
        return child

    def enabled(self, level: str) -> bool:
        return _level_value(level) >= self.min_level

    def _emit(self, level: str, message: str, fields: dict[str, Any]) -> None:
        if not self.enabled(level):
            return
        record = LogRecord(level, message, self.name, fields={**self.context, **fields})
        print(record.to_json(), file=self.output or sys.stderr)

    def debug(self, message: str, **fields: Any) -> None:
        self._emit("DEBUG", message, fields)

    def info(self, message: str, **fields: Any) -> None:
        self._emit("INFO", message, fields)

    def warn(self, message: str, **fields: Any) -> None:
        self._emit("WARN", message, fields)

    def error(self, message: str, **fields: Any) -> None:
        self._emit("ERROR", message, fields)

    @contextmanager
    def timer(self, operation: str, **fields: Any):
        """Log ``<operation> completed`` with its wall time at DEBUG level."""
        start = time.perf_counter()
        try:
            yield
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            self.debug(f"{operation} completed", elapsed_ms=elapsed_ms, **fields)


_loggers: dict[str, StructuredLogger] = {}
_default_level = "INFO"


def get_logger(name: str) -> StructuredLogger:
    """Shared logger for ``name`` (normally ``__name__``)."""
    if name not in _loggers:
        _loggers[name] = StructuredLogger(name, min_level=_default_level)
    return _loggers[name]


def set_log_level(level: str) -> None:
    """Apply ``level`` to existing loggers and to those created later.

    Raises:
        ValueError: ``level`` is not one of DEBUG, INFO, WARN, ERROR.
    """
    global _default_level
    value = _level_value(level)
    _default_level = level.upper()
    for logger in _loggers.values():
        logger.min_level = value
