from __future__ import annotations

import logging
import threading
from typing import Any, Optional

from src.core.extlog.log_severity import LogSeverity
from src.core.extlog.message_bundle import MessageBundle
from src.core.extlog.message_format import PositionalMessage

_RESOURCE_BUNDLE_ATTR = "resource_bundle"
_NO_RESULT = object()


def _from_caller(kwargs: dict[str, Any]) -> dict[str, Any]:
    # One extra frame: the ExtendedLogger method itself.
    kwargs["stacklevel"] = kwargs.get("stacklevel", 1) + 1
    return kwargs


def _with_source(kwargs: dict[str, Any], source_class: Optional[str], source_method: Optional[str]) -> dict[str, Any]:
    extra = dict(kwargs.get("extra") or {})
    extra["source_class"] = source_class
    extra["source_method"] = source_method
    kwargs["extra"] = extra
    return kwargs


class ExtendedLogger:
    """
    Decorator over a stdlib logging.Logger.

    Adds thread-annotated debug logging at a configured level and forwards
    every other operation to the wrapped logger. The wrapped logger is a
    shared handle: level, handler and filter changes made here are visible
    to every other holder of the same logger, and the other way round.

    Forwarded calls keep the wrapped logger's exceptions and behaviour.
    Emission calls bump ``stacklevel`` so records name the caller, not
    this class.
    """

    __slots__ = ("_logger", "_debug_level")

    def __init__(self, logger: logging.Logger, debug_level: int):
        self._logger = logger
        self._debug_level = debug_level

    # --------------------------
    # Debug logging
    # --------------------------

    @property
    def debug_level(self) -> int:
        return self._debug_level

    def is_debug_loggable(self) -> bool:
        """
        True if the wrapped logger currently emits at the debug level.

        Honours the effective (inherited) threshold and logging.disable().
        """
        return self._logger.isEnabledFor(self._debug_level)

    def debug_log(self, message_template: str, *args: Any) -> None:
        """
        Log a debug message at the configured debug level.

        The current thread name is appended as one extra positional
        parameter, and the template gets a matching ``on thread {N}``
        suffix where N is that parameter's index. With no args the thread
        name is parameter 0, so a ``{0}`` in the template also renders as
        the thread name.
        """
        if not self._logger.isEnabledFor(self._debug_level):
            return

        message_arguments = args + (threading.current_thread().name,)
        template = "[DEBUG] " + message_template + " on thread {" + str(len(message_arguments) - 1) + "}"
        self._logger.log(self._debug_level, PositionalMessage(template, message_arguments), stacklevel=2)

    # --------------------------
    # Emission
    # --------------------------

    def log(self, level: int, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(level, msg, *args, **_from_caller(kwargs))

    def debug(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(msg, *args, **_from_caller(kwargs))

    def info(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.info(msg, *args, **_from_caller(kwargs))

    def warning(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(msg, *args, **_from_caller(kwargs))

    def error(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.error(msg, *args, **_from_caller(kwargs))

    def exception(self, msg: Any, *args: Any, exc_info: Any = True, **kwargs: Any) -> None:
        self._logger.exception(msg, *args, exc_info=exc_info, **_from_caller(kwargs))

    def critical(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.critical(msg, *args, **_from_caller(kwargs))

    def severe(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(LogSeverity.SEVERE, msg, *args, **_from_caller(kwargs))

    def config(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(LogSeverity.CONFIG, msg, *args, **_from_caller(kwargs))

    def fine(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(LogSeverity.FINE, msg, *args, **_from_caller(kwargs))

    def finer(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(LogSeverity.FINER, msg, *args, **_from_caller(kwargs))

    def finest(self, msg: Any, *args: Any, **kwargs: Any) -> None:
        self._logger.log(LogSeverity.FINEST, msg, *args, **_from_caller(kwargs))

    def logp(self, level: int, source_class: Optional[str], source_method: Optional[str],
             msg: Any, *args: Any, **kwargs: Any) -> None:
        """Log with explicit source class/method, stored on the record as extras."""
        kwargs = _with_source(kwargs, source_class, source_method)
        self._logger.log(level, msg, *args, **_from_caller(kwargs))

    def logrb(self, level: int, source_class: Optional[str], source_method: Optional[str],
              bundle: Optional[MessageBundle], msg_key: str, *params: Any, **kwargs: Any) -> None:
        """
        Log a message looked up in a message bundle.

        Falls back to the wrapped logger's bundle when ``bundle`` is None,
        and to ``msg_key`` itself when no bundle has the key.
        """
        if not self._logger.isEnabledFor(level):
            return
        if bundle is None:
            bundle = self.resource_bundle
        template = bundle.get(msg_key) if bundle is not None else msg_key
        kwargs = _with_source(kwargs, source_class, source_method)
        self._logger.log(level, PositionalMessage(template, params), **_from_caller(kwargs))

    # --------------------------
    # Tracing
    # --------------------------

    def entering(self, source_class: Optional[str], source_method: Optional[str], *params: Any) -> None:
        if not self._logger.isEnabledFor(LogSeverity.FINER):
            return
        template = "ENTRY" + "".join(" {" + str(i) + "}" for i in range(len(params)))
        self._logger.log(
            LogSeverity.FINER,
            PositionalMessage(template, params),
            **_from_caller(_with_source({}, source_class, source_method)),
        )

    def exiting(self, source_class: Optional[str], source_method: Optional[str], result: Any = _NO_RESULT) -> None:
        if not self._logger.isEnabledFor(LogSeverity.FINER):
            return
        if result is _NO_RESULT:
            message = PositionalMessage("RETURN")
        else:
            message = PositionalMessage("RETURN {0}", (result,))
        self._logger.log(LogSeverity.FINER, message, **_from_caller(_with_source({}, source_class, source_method)))

    def throwing(self, source_class: Optional[str], source_method: Optional[str], thrown: BaseException) -> None:
        if not self._logger.isEnabledFor(LogSeverity.FINER):
            return
        self._logger.log(
            LogSeverity.FINER,
            PositionalMessage("THROW"),
            exc_info=thrown,
            **_from_caller(_with_source({}, source_class, source_method)),
        )

    # --------------------------
    # Threshold, filters, handlers
    # --------------------------

    def handle(self, record: logging.LogRecord) -> None:
        """Dispatch an already-built record through the wrapped logger's filters and handlers."""
        self._logger.handle(record)

    def isEnabledFor(self, level: int) -> bool:
        return self._logger.isEnabledFor(level)

    def setLevel(self, level: int | str) -> None:
        self._logger.setLevel(level)

    @property
    def level(self) -> int:
        return self._logger.level

    def getEffectiveLevel(self) -> int:
        return self._logger.getEffectiveLevel()

    def addFilter(self, filter: Any) -> None:
        self._logger.addFilter(filter)

    def removeFilter(self, filter: Any) -> None:
        self._logger.removeFilter(filter)

    @property
    def filters(self) -> list:
        return self._logger.filters

    def addHandler(self, handler: logging.Handler) -> None:
        self._logger.addHandler(handler)

    def removeHandler(self, handler: logging.Handler) -> None:
        self._logger.removeHandler(handler)

    def hasHandlers(self) -> bool:
        return self._logger.hasHandlers()

    @property
    def handlers(self) -> list[logging.Handler]:
        return self._logger.handlers

    # --------------------------
    # Hierarchy and identity
    # --------------------------

    @property
    def parent(self) -> Optional[logging.Logger]:
        return self._logger.parent

    @parent.setter
    def parent(self, parent: Optional[logging.Logger]) -> None:
        self._logger.parent = parent

    @property
    def propagate(self) -> bool:
        return self._logger.propagate

    @propagate.setter
    def propagate(self, value: bool) -> None:
        self._logger.propagate = value

    @property
    def name(self) -> str:
        return self._logger.name

    @property
    def resource_bundle(self) -> Optional[MessageBundle]:
        return getattr(self._logger, _RESOURCE_BUNDLE_ATTR, None)

    @resource_bundle.setter
    def resource_bundle(self, bundle: Optional[MessageBundle]) -> None:
        setattr(self._logger, _RESOURCE_BUNDLE_ATTR, bundle)

    @property
    def resource_bundle_name(self) -> Optional[str]:
        bundle = self.resource_bundle
        return bundle.name if bundle is not None else None

    # --------------------------
    # Structural identity
    # --------------------------

    def __repr__(self) -> str:
        return f"ExtendedLogger(logger={self._logger!r}, debug_level={self._debug_level!r})"

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._logger == other._logger and self._debug_level == other._debug_level

    def __hash__(self) -> int:
        return hash((self._logger, self._debug_level))
