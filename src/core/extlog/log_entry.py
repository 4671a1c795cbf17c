from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List, Optional
import logging
import uuid

from src.core.extlog.message_format import PositionalMessage


@dataclass
class LogEntry:
    """
    Serializable snapshot of a single emitted log record.

    Used by the JSONL and ZMQ handlers so every sink writes the
    same shape.
    """

    log_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    # Unique identifier for this entry.

    timestamp: float = 0.0
    # record.created: wall-clock seconds when the record was made.

    severity: str = "INFO"
    # Level name as registered with the logging module.

    level: int = logging.INFO
    # Numeric level, for sinks that filter by threshold.

    logger_name: str = ""
    # Name of the logger that emitted the record.

    thread_name: str = ""
    # Thread that emitted the record.

    message: str = ""
    # Fully rendered message text.

    template: Optional[str] = None
    # Raw {N} template, only for positional messages.

    params: List[str] = field(default_factory=list)
    # Positional parameters rendered with str().

    source_class: Optional[str] = None
    source_method: Optional[str] = None
    # Explicit source location from logp / logrb / tracing calls.

    exc_text: Optional[str] = None
    # Formatted traceback, when the record carries exc_info.

    @classmethod
    def from_record(cls, record: logging.LogRecord, formatter: Optional[logging.Formatter] = None) -> "LogEntry":
        msg = record.msg
        template = None
        params: List[str] = []
        if isinstance(msg, PositionalMessage):
            template = msg.template
            params = [str(p) for p in msg.params]

        exc_text = None
        if record.exc_info:
            exc_text = (formatter or logging.Formatter()).formatException(record.exc_info)

        return cls(
            timestamp=record.created,
            severity=record.levelname,
            level=record.levelno,
            logger_name=record.name,
            thread_name=record.threadName or "",
            message=record.getMessage(),
            template=template,
            params=params,
            source_class=getattr(record, "source_class", None),
            source_method=getattr(record, "source_method", None),
            exc_text=exc_text,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
