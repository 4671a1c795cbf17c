from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Optional

from src.core.extlog.extended_logger import ExtendedLogger
from src.core.extlog.jsonl_log_handler import JsonlLogHandler
from src.core.extlog.log_severity import LogSeverity, UnknownSeverityError, parse_severity
from src.core.extlog.zmq_log_handler import ZmqLogHandler


class LoggerConfigError(ValueError):
    pass


@dataclass(frozen=True)
class LoggerConfig:
    """
    Configuration for one extended logger.

    The named stdlib logger is shared process-wide; building a config
    mutates that logger (level, propagate, handlers).
    """

    name: str                               # e.g. "src.core.cmb.router"
    debug_level: int = LogSeverity.FINE     # Level used by debug_log()
    level: Optional[int] = None             # Logger threshold; None leaves it untouched
    propagate: bool = True                  # Forward records to parent handlers
    jsonl_path: Optional[str] = None        # Attach a JsonlLogHandler when set
    zmq_endpoint: Optional[str] = None      # Attach a ZmqLogHandler when set
    zmq_topic: str = "log"

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "LoggerConfig":
        """
        Build a config from plain data (JSON, CLI args), validating
        severity names and rejecting unknown keys.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(k for k in data if k not in known)
        if unknown:
            raise LoggerConfigError(f"Unknown config keys: {unknown}")
        if not data.get("name"):
            raise LoggerConfigError("Logger config requires a non-empty 'name'.")

        values = dict(data)
        try:
            if "debug_level" in values:
                values["debug_level"] = parse_severity(values["debug_level"])
            if values.get("level") is not None:
                values["level"] = parse_severity(values["level"])
        except UnknownSeverityError as e:
            raise LoggerConfigError(f"Invalid severity: {e}") from e

        if not isinstance(values.get("propagate", True), bool):
            raise LoggerConfigError(f"'propagate' must be a bool, got {values['propagate']!r}")
        for key in ("jsonl_path", "zmq_endpoint"):
            if values.get(key) is not None and not isinstance(values[key], str):
                raise LoggerConfigError(f"'{key}' must be a string, got {values[key]!r}")
        if not isinstance(values.get("zmq_topic", "log"), str):
            raise LoggerConfigError(f"'zmq_topic' must be a string, got {values['zmq_topic']!r}")

        return cls(**values)


def get_extended_logger(name: str, debug_level: int = LogSeverity.FINE) -> ExtendedLogger:
    return ExtendedLogger(logging.getLogger(name), debug_level)


def build_extended_logger(config: LoggerConfig) -> ExtendedLogger:
    """
    Apply a LoggerConfig to its stdlib logger and wrap it.

    Handlers are attached at most once per target, so building the
    same config twice does not duplicate output.
    """
    logger = logging.getLogger(config.name)
    if config.level is not None:
        logger.setLevel(config.level)
    logger.propagate = config.propagate

    if config.jsonl_path is not None:
        _attach_jsonl(logger, config.jsonl_path)
    if config.zmq_endpoint is not None:
        _attach_zmq(logger, config.zmq_endpoint, config.zmq_topic)

    return ExtendedLogger(logger, config.debug_level)


def _attach_jsonl(logger: logging.Logger, path: str) -> None:
    target = Path(path)
    for existing in logger.handlers:
        if isinstance(existing, JsonlLogHandler) and existing.path == target:
            return
    logger.addHandler(JsonlLogHandler(target))


def _attach_zmq(logger: logging.Logger, endpoint: str, topic: str) -> None:
    for existing in logger.handlers:
        if isinstance(existing, ZmqLogHandler) and existing.endpoint == endpoint and existing.topic == topic:
            return
    logger.addHandler(ZmqLogHandler(endpoint, topic=topic))
