import logging
from enum import IntEnum
from typing import Union


class UnknownSeverityError(ValueError):
    pass


class LogSeverity(IntEnum):
    """
    Ordered severity levels expressed as stdlib logging levels.

    FINE and SEVERE share their numeric value with logging.DEBUG and
    logging.ERROR, so records at those levels keep the stdlib names.
    """

    ALL = 1             # Everything, including the finest tracing
    FINEST = 5          # Highly detailed tracing
    FINER = 7           # Method entry / exit / throw tracing
    FINE = 10           # Developer-focused diagnostic information
    CONFIG = 15         # Static configuration messages
    INFO = 20           # Normal system operation
    WARNING = 30        # Unexpected but recoverable condition
    SEVERE = 40         # Operation failed
    OFF = 2**31 - 1     # Turns logging off when used as a threshold

    # stdlib aliases
    DEBUG = 10
    ERROR = 40


_REGISTERED_NAMES = {
    LogSeverity.ALL: "ALL",
    LogSeverity.FINEST: "FINEST",
    LogSeverity.FINER: "FINER",
    LogSeverity.CONFIG: "CONFIG",
    LogSeverity.OFF: "OFF",
}


def register_level_names() -> None:
    for severity, name in _REGISTERED_NAMES.items():
        logging.addLevelName(int(severity), name)


def parse_severity(value: Union[LogSeverity, int, str]) -> Union[LogSeverity, int]:
    """
    Resolve a severity from an enum member, a numeric level or a name.

    Names are case-insensitive and may use the stdlib aliases (DEBUG, ERROR).
    Numeric levels that are not members pass through unchanged so custom
    levels keep working.
    """
    if isinstance(value, LogSeverity):
        return value
    if isinstance(value, bool):
        raise UnknownSeverityError(f"Not a severity: {value!r}")
    if isinstance(value, int):
        try:
            return LogSeverity(value)
        except ValueError:
            return value
    if isinstance(value, str):
        try:
            return LogSeverity[value.strip().upper()]
        except KeyError:
            raise UnknownSeverityError(f"Unknown severity name: {value!r}") from None
    raise UnknownSeverityError(f"Not a severity: {value!r}")


register_level_names()
