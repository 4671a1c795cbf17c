import json
import logging
from pathlib import Path

from src.core.extlog.log_entry import LogEntry


class JsonlLogHandler(logging.Handler):
    """
    Handler that persists records to an append-only JSONL file.

    Each record is written as a single LogEntry JSON object per line,
    enabling efficient tailing, replay, and offline analysis.
    """

    def __init__(self, logfile_path, level: int = logging.NOTSET):
        super().__init__(level)
        self.path = Path(logfile_path)

        # Ensure parent directory exists
        self.path.parent.mkdir(parents=True, exist_ok=True)

        self._file = open(self.path, "a", encoding="utf-8")

    def emit(self, record: logging.LogRecord) -> None:
        # handle() already holds the handler lock here.
        try:
            entry = LogEntry.from_record(record, self.formatter)
            self._file.write(json.dumps(entry.to_dict(), ensure_ascii=False, default=str) + "\n")
            self._file.flush()
        except Exception:
            self.handleError(record)

    def close(self) -> None:
        self.acquire()
        try:
            if not self._file.closed:
                self._file.close()
        finally:
            self.release()
        super().close()

    def __repr__(self) -> str:
        return f"<JsonlLogHandler {self.path} ({logging.getLevelName(self.level)})>"
